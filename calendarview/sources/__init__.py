"""Item sources."""

from .store import ItemStore

__all__ = ["ItemStore"]
