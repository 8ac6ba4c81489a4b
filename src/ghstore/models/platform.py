"""Platform enumeration."""

from enum import Enum


class PlatformType(str, Enum):
    """Platforms an application can be installed on."""

    ANDROID = "android"
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
