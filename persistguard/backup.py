"""File hashing and copying for backups."""

from __future__ import annotations

import hashlib
import os

HASH_BUFFER_SIZE = 32768


class BackupError(OSError):
    """Raised when a file cannot be read, hashed or copied."""


def hash_file(path: str | os.PathLike) -> bytes:
    """Return the SHA-256 digest of the file at ``path``."""
    try:
        with open(path, "rb") as handle:
            digest = hashlib.sha256()
            for block in iter(lambda: handle.read(HASH_BUFFER_SIZE), b""):
                digest.update(block)
    except OSError as exc:
        raise BackupError(f"Erro ao abrir arquivo do Hash: {os.fspath(path)}") from exc
    return digest.digest()


def backup_file(source: str | os.PathLike, destination: str | os.PathLike) -> int:
    """Copy ``source`` to ``destination`` and return the number of bytes copied."""
    try:
        with open(source, "rb") as src, open(destination, "wb") as dst:
            copied = 0
            for block in iter(lambda: src.read(HASH_BUFFER_SIZE), b""):
                dst.write(block)
                copied += len(block)
    except OSError as exc:
        raise BackupError(
            f"Erro ao abrir arquivo para backup: {os.fspath(source)} -> {os.fspath(destination)}"
        ) from exc
    return copied