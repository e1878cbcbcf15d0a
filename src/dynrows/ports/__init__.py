"""Port abstractions for dynrows collaborators."""

from dynrows.ports.cursor import Cursor

__all__ = ["Cursor"]
