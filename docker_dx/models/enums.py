"""
Enumeration classes for docker-dx.
"""

from enum import Enum


class ObjectKind(str, Enum):
    """Kinds of objects examine can find, in probe order."""
    CONTAINER = "container"
    IMAGE = "image"
    VOLUME = "volume"


class DumpFormat(str, Enum):
    """Structured text formats for examined records."""
    JSON = "json"
    YAML = "yaml"
