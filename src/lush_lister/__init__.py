"""Listing sheet and image batch tools for resellers."""

__version__ = "0.1.0"
