"""Contact entity."""

from .contact import Contact

__all__ = ["Contact"]
