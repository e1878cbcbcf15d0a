"""Cursor adapters for dynrows."""
