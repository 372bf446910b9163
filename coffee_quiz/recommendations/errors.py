from __future__ import annotations


class CatalogError(RuntimeError):
    """Raised when the static catalog or brew-tips table is misconfigured."""
