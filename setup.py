from setuptools import setup, find_namespace_packages

setup(
    name='nsw-extensions',
    version='1.0.0',

    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['nsw.ext.*']),

    # Only the standard library is needed at runtime.

    extras_require={
        'test': [
            'pytest>=7',
        ],
    },

    zip_safe=True,

    description="Extension-style helpers for dicts, sequences, strings, reflection and precondition checks",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
        "Typing :: Typed",
    ],
    python_requires='>=3.10',
)
