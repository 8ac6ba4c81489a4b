"""Classification of release assets as installable per platform."""

import platform
import sys
from collections.abc import Iterable, Mapping

from ghstore.exceptions import ValidationError
from ghstore.logger import get_logger
from ghstore.models.platform import PlatformType

logger = get_logger(__name__)

# Suffixes matched case-insensitively against asset names
DEFAULT_INSTALLABLE_PATTERNS: dict[PlatformType, frozenset[str]] = {
    PlatformType.ANDROID: frozenset({".apk"}),
    PlatformType.WINDOWS: frozenset({".msi", ".exe"}),
    PlatformType.MACOS: frozenset({".dmg", ".pkg"}),
    PlatformType.LINUX: frozenset({".appimage", ".deb", ".rpm"}),
}


def _coerce_platform(value: PlatformType | str) -> PlatformType:
    if isinstance(value, PlatformType):
        return value
    try:
        return PlatformType(str(value).lower())
    except ValueError:
        raise ValidationError("platform.unsupported", platform=value) from None


def installable_patterns(platform_type: PlatformType | str) -> frozenset[str]:
    """Return the default installable suffixes for a platform.

    Raises:
        ValidationError: If the platform is not one of PlatformType
    """
    return DEFAULT_INSTALLABLE_PATTERNS[_coerce_platform(platform_type)]


def detect_platform() -> PlatformType:
    """Map the running interpreter's OS onto PlatformType."""
    if hasattr(sys, "getandroidapilevel"):
        return PlatformType.ANDROID

    system = platform.system().lower()
    if system == "windows":
        return PlatformType.WINDOWS
    if system == "darwin":
        return PlatformType.MACOS
    if system == "linux":
        return PlatformType.LINUX
    raise ValidationError("platform.unsupported", platform=system)


class PlatformClassifier:
    """Decides whether an asset name is installable on one platform."""

    def __init__(
        self,
        platform_type: PlatformType | str,
        extension_overrides: Mapping[PlatformType, Iterable[str]] | None = None,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            platform_type: Platform the assets are classified for
            extension_overrides: Replacement suffix lists, keyed by platform

        Raises:
            ValidationError: If the platform is unknown or an override suffix lacks a leading dot
        """
        self.platform = _coerce_platform(platform_type)
        self._patterns = dict(DEFAULT_INSTALLABLE_PATTERNS)

        for key, extensions in (extension_overrides or {}).items():
            target = _coerce_platform(key)
            normalized = frozenset(ext.strip().lower() for ext in extensions)
            for ext in normalized:
                if not ext.startswith("."):
                    raise ValidationError("platform.invalid_extension", extension=ext, platform=target.value)
            self._patterns[target] = normalized

        logger.debug(
            "Platform classifier ready",
            platform=self.platform.value,
            patterns=sorted(self._patterns[self.platform]),
        )

    def installable_patterns(self, platform_type: PlatformType | str | None = None) -> frozenset[str]:
        """Return the installable suffixes for the given (or the active) platform."""
        if platform_type is None:
            return self._patterns[self.platform]
        return self._patterns[_coerce_platform(platform_type)]

    def is_installable(self, asset_name: str) -> bool:
        """Check if an asset name ends with one of the active platform's suffixes."""
        return asset_name.lower().endswith(tuple(self._patterns[self.platform]))
