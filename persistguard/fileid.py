"""Sequential file identifiers with persistent generator state and a path history."""

from __future__ import annotations

import enum
import os
import stat
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO

MAX_ID_LEN = 32
HISTORY_FILE = "historico_ids.txt"
GENERATOR_STATE_FILE = "generator_state.bin"

# The counter wraps here and the prefix letter advances.
COUNTER_LIMIT = 10**19
_GROUPS = 7
_COUNTER_MAX = 2**64

# On-disk layout: one prefix byte, padding to 8 bytes, unsigned 64-bit counter.
_STATE = struct.Struct("<c7xQ")


class StateError(ValueError):
    """Raised when generator state is malformed or did not advance as expected."""


class Advance(enum.Enum):
    """How a generator moved between two observed states."""

    COUNTER = "counter"
    PREFIX = "prefix"


def format_file_id(prefix: str, counter: int) -> str:
    """Render a prefix and counter as ``p-ddd-ddd-ddd-ddd-ddd-ddd-ddd``."""
    if len(prefix) != 1:
        raise ValueError(f"prefix must be a single character, got {prefix!r}")
    if not 0 <= counter < _COUNTER_MAX:
        raise ValueError(f"counter out of range: {counter}")
    groups = ((counter // 1000**power) % 1000 for power in reversed(range(_GROUPS)))
    return prefix + "".join(f"-{group:03d}" for group in groups)


@dataclass
class FileIDGenerator:
    """Produces identifiers in sequence from a prefix letter and a counter."""

    prefix: str = "a"
    counter: int = 0

    @classmethod
    def load(cls, path: str | os.PathLike) -> "FileIDGenerator":
        """Read saved state, or start at ``a`` and 0 if the file does not exist."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return cls()
        if len(data) < _STATE.size:
            raise StateError(f"state file {os.fspath(path)!r} is truncated")
        prefix, counter = _STATE.unpack_from(data)
        return cls(prefix.decode("latin-1"), counter)

    def save(self, path: str | os.PathLike) -> None:
        """Write the current state to ``path``."""
        Path(path).write_bytes(_STATE.pack(self.prefix.encode("latin-1"), self.counter))

    def peek_id(self) -> str:
        """Return the identifier the next call to :meth:`next_id` will produce."""
        return format_file_id(self.prefix, self.counter)

    def next_id(self) -> str:
        """Return the current identifier and advance the generator."""
        file_id = self.peek_id()
        self.counter += 1
        if self.counter == COUNTER_LIMIT:
            self.counter = 0
            self.prefix = chr(ord(self.prefix) + 1)
        return file_id

    def check_advance(self, previous_counter: int, previous_prefix: str) -> Advance:
        """Confirm the generator moved exactly one step from the given state."""
        if self.prefix == previous_prefix and self.counter == previous_counter + 1:
            return Advance.COUNTER
        if (
            ord(self.prefix) == ord(previous_prefix) + 1
            and self.counter == 0
            and previous_counter + 1 == COUNTER_LIMIT
        ):
            return Advance.PREFIX
        raise StateError(
            "identifier generation failed: expected step from "
            f"{previous_prefix}/{previous_counter}, got {self.prefix}/{self.counter}"
        )


@dataclass(frozen=True)
class History:
    """Text file listing paths that already received an identifier."""

    path: str | os.PathLike = HISTORY_FILE

    def contains(self, path: str) -> bool:
        """Return whether ``path`` is recorded in the history."""
        try:
            with open(self.path, encoding="utf-8", newline="") as handle:
                for line in handle:
                    entry = line.partition("\n")[0].partition("\r")[0]
                    if entry == path:
                        return True
        except FileNotFoundError:
            return False
        return False

    def record(self, path: str) -> None:
        """Append ``path`` to the history."""
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(f"{path}\n")


def path_exists(path: str | os.PathLike) -> bool:
    """Return whether ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_system_folder(path: str) -> bool:
    """Return whether ``path`` looks like a system folder to be skipped."""
    return "Windows" in path or "Program Files" in path


def scan_and_generate(
    base_path: str | os.PathLike, generator: FileIDGenerator
) -> Iterator[tuple[str, str]]:
    """Walk directories under ``base_path``, yielding ``(path, id)`` for each one.

    Directories are visited depth first; system folders and everything below
    them are skipped. Unreadable directories are passed over silently.
    """
    base = os.fspath(base_path)
    seen: set[tuple[int, int]] = set()
    try:
        root = os.stat(base)
    except OSError:
        return
    seen.add((root.st_dev, root.st_ino))
    yield from _scan(base, generator, seen)


def _scan(
    base: str, generator: FileIDGenerator, seen: set[tuple[int, int]]
) -> Iterator[tuple[str, str]]:
    try:
        names = sorted(os.listdir(base))
    except OSError:
        return
    for name in names:
        path = f"{base}/{name}"
        try:
            info = os.stat(path)
        except OSError:
            continue
        if not stat.S_ISDIR(info.st_mode) or is_system_folder(path):
            continue
        key = (info.st_dev, info.st_ino)
        if key in seen:
            continue
        seen.add(key)
        yield path, generator.next_id()
        yield from _scan(path, generator, seen)


def interactive_menu(
    generator: FileIDGenerator,
    history: History | None = None,
    state_path: str | os.PathLike = GENERATOR_STATE_FILE,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> list[tuple[str, str]]:
    """Prompt for paths and assign identifiers until ``sair`` or end of input.

    Returns the ``(path, id)`` pairs assigned during the session.
    """
    history = history if history is not None else History()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    assigned: list[tuple[str, str]] = []

    while True:
        stdout.write(
            "\nDigite caminho do arquivo/pasta para gerar ID (ou 'sair' para terminar):\n> "
        )
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        path = line.partition("\n")[0].partition("\r")[0]
        if path == "sair":
            break
        if not path_exists(path):
            stdout.write(f"Caminho não existe: {path}\n")
            continue
        if history.contains(path):
            stdout.write("Caminho já processado, pulando.\n")
            continue

        file_id = generator.next_id()
        stdout.write(f"ID gerado para '{path}': {file_id}\n")
        history.record(path)
        generator.save(state_path)
        assigned.append((path, file_id))

    return assigned