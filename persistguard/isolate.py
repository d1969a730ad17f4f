"""Moving suspicious files into a restricted quarantine directory."""

from __future__ import annotations

import os

ISOLATE_DIR = "isolados"


class IsolationError(OSError):
    """Raised when a file cannot be moved into isolation."""


def ensure_directory(path: str | os.PathLike) -> None:
    """Create ``path`` with owner-only permissions if it does not exist."""
    if not os.path.exists(path):
        os.mkdir(path, 0o700)


def isolate_file(original_path: str, isolate_dir: str | os.PathLike = ISOLATE_DIR) -> str:
    """Move ``original_path`` into ``isolate_dir`` and return its new path."""
    ensure_directory(isolate_dir)
    name = original_path.rpartition("/")[2]
    new_path = f"{os.fspath(isolate_dir)}/{name}"
    try:
        os.rename(original_path, new_path)
    except OSError as exc:
        raise IsolationError(
            f"Erro ao mover arquivo para isolamento: {original_path}"
        ) from exc
    print(f"[ISOLAMENTO] Arquivo movido para: {new_path}")
    return new_path