"""Command-line front end for byte-encodings."""

from byte_encodings.cli.app import create_app

__all__ = ["create_app"]
