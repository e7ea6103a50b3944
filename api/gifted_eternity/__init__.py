"""Gifted Eternity schema catalog: table declarations, migrations and seed scripts."""

__version__ = "0.1.0"
