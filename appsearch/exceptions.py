"""Custom exception hierarchy for installed-app search."""

from __future__ import annotations


class AppSearchError(Exception):
    """Base error for the installed-app search worker."""


class InventoryError(AppSearchError):
    """Raised when the application inventory cannot be enumerated."""


class NameNotFoundError(InventoryError):
    """Raised when a per-package lookup does not know the package."""

    def __init__(self, package_name: str) -> None:
        self.package_name = package_name
        super().__init__(f"Package not found: {package_name}")


class SiteMapError(AppSearchError):
    """Raised when the site map cannot resolve a breadcrumb."""
