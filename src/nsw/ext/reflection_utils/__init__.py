"""
Utilities for introspecting types and accessing object properties by name.

The centerpiece is `TypeWrapper`, which provides get/set access to the public properties of an object by name. The
work of discovering the properties of a type and building accessors for them is done only once per type, the results
being kept in a process-wide cache (see `nsw.ext.reflection_utils.accessors`).
"""


__version__ = '1.0.0'
