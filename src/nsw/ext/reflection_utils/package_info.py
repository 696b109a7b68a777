from importlib import metadata
from typing import Optional


class PackageInfo:
    """
    Gives access to the metadata of an installed distribution (version, summary, author etc.)

    Example::

        info = PackageInfo('nsw-extensions')
        print(info.name, info.version)

    Metadata fields that the distribution does not declare are reported as empty strings. If the distribution is not
    installed, `importlib.metadata.PackageNotFoundError` is raised at construction.
    """
    _distribution: metadata.Distribution

    def __init__(self, distribution_name: str):
        self._distribution = metadata.distribution(distribution_name)

    @staticmethod
    def of_module(module_name: str) -> Optional['PackageInfo']:
        """
        Gets the info for the distribution that provides a given top-level module or package, or None if it cannot be
        determined.
        """
        top_level = module_name.partition('.')[0]
        dist_names = metadata.packages_distributions().get(top_level)

        return PackageInfo(dist_names[0]) if dist_names else None

    def _get_field(self, field: str) -> str:
        return self._distribution.metadata.get(field) or ''

    @property
    def name(self) -> str:
        return self._get_field('Name')

    @property
    def version(self) -> str:
        return self._distribution.version or ''

    @property
    def summary(self) -> str:
        return self._get_field('Summary')

    @property
    def author(self) -> str:
        return self._get_field('Author')

    @property
    def author_email(self) -> str:
        return self._get_field('Author-email')

    @property
    def license(self) -> str:
        return self._get_field('License') or self._get_field('License-Expression')

    @property
    def home_page(self) -> str:
        return self._get_field('Home-page')

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackageInfo):
            return NotImplemented

        return _normalize_name(self.name) == _normalize_name(other.name)

    def __hash__(self) -> int:
        return hash(_normalize_name(self.name))

    def __repr__(self) -> str:
        return f"PackageInfo({self.name!r}, version={self.version!r})"


def _normalize_name(name: str) -> str:
    return name.lower().replace('_', '-').replace('.', '-')
