"""Platform services."""

from .classifier import PlatformClassifier, detect_platform, installable_patterns

__all__ = ["PlatformClassifier", "detect_platform", "installable_patterns"]
