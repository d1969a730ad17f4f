"""Persistent file identifiers, hashed backups, quarantine moves and sampled chunk reading."""

__version__ = "0.1.0"