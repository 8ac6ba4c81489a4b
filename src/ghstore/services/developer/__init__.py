"""Developer services."""

from .service import DeveloperProfileService

__all__ = ["DeveloperProfileService"]
