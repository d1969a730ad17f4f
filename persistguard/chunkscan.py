"""Planning and reading sample chunks spread across a file."""

from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass
from typing import Iterator

MAX_SMART_CHUNK_SIZE = 2 * 1024 * 1024
MIN_ANALYSIS_CHUNKS = 3
MAX_ANALYSIS_CHUNKS = 30
MAX_FILE_SIZE_TO_FULL_SCAN = 100 * 1024 * 1024
LARGE_FILE_SIZE = 50 * 1024 * 1024
DYNAMIC_CHUNK_RATIO = 0.1
MIN_CHUNK_SIZE = 128 * 1024
MAX_CHUNK_SIZE = 5 * 1024 * 1024

_MB = 1024 * 1024


@dataclass
class AnalysisPlan:
    """How much of a file to sample, and in what pieces."""

    filename: str
    total_size: int
    chunks_to_analyze: int = MIN_ANALYSIS_CHUNKS
    chunk_size: int = MAX_SMART_CHUNK_SIZE
    min_chunks: int = MIN_ANALYSIS_CHUNKS
    coverage_ratio: float = DYNAMIC_CHUNK_RATIO


@dataclass(frozen=True)
class Chunk:
    """A piece of a file read at a given offset; ``index`` counts from 1."""

    index: int
    offset: int
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def get_analysis_plan(filename: str | os.PathLike) -> AnalysisPlan:
    """Build a sampling plan from the size of ``filename``.

    Raises :class:`OSError` if the file cannot be stat'ed.
    """
    total = os.stat(filename).st_size
    plan = AnalysisPlan(filename=os.fspath(filename), total_size=total)

    if total > MAX_FILE_SIZE_TO_FULL_SCAN:
        plan.coverage_ratio = 0.05
        plan.chunks_to_analyze = MAX_ANALYSIS_CHUNKS
    elif total > LARGE_FILE_SIZE:
        plan.coverage_ratio = 0.1
        plan.chunks_to_analyze = 15

    covered = int(total * plan.coverage_ratio)
    plan.chunk_size = covered // plan.chunks_to_analyze

    if plan.chunk_size < MIN_CHUNK_SIZE:
        plan.chunk_size = MIN_CHUNK_SIZE
        plan.chunks_to_analyze = covered // plan.chunk_size
    elif plan.chunk_size > MAX_CHUNK_SIZE:
        plan.chunk_size = MAX_CHUNK_SIZE
        plan.chunks_to_analyze = covered // plan.chunk_size

    return plan


def chunk_offsets(plan: AnalysisPlan, rng: random.Random | None = None) -> Iterator[int]:
    """Yield offsets: start, middle, end, then random positions."""
    rng = rng if rng is not None else random.Random()
    span = max(plan.total_size - plan.chunk_size, 0)
    for i in range(plan.chunks_to_analyze):
        if i == 0:
            yield 0
        elif i == 1:
            yield plan.total_size // 2
        elif i == 2:
            yield span
        else:
            yield rng.randrange(span) if span else 0


def analyze_file_chunks(
    plan: AnalysisPlan, rng: random.Random | None = None
) -> list[Chunk]:
    """Read the chunks the plan calls for; empty reads are left out."""
    chunks: list[Chunk] = []
    with open(plan.filename, "rb") as handle:
        for index, offset in enumerate(chunk_offsets(plan, rng), start=1):
            handle.seek(offset)
            data = handle.read(plan.chunk_size)
            if data:
                chunks.append(Chunk(index, offset, data))
    return chunks


def main(argv: list[str] | None = None) -> int:
    """Print a sampling plan for a file and the chunks read from it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Uso: persistguard-chunkscan <arquivo>")
        return 1

    try:
        plan = get_analysis_plan(args[0])
    except OSError as exc:
        print(f"Erro ao obter estatísticas do arquivo: {exc}", file=sys.stderr)
        return 1

    print(
        f"Analisando {plan.filename} ({plan.total_size / _MB:.2f} MB) com "
        f"{plan.chunks_to_analyze} chunks de {plan.chunk_size / 1024:.2f} KB cada"
    )
    try:
        chunks = analyze_file_chunks(plan)
    except OSError as exc:
        print(f"Erro ao abrir arquivo para análise: {exc}", file=sys.stderr)
        return 1
    for chunk in chunks:
        print(
            f"Chunk {chunk.index}: Offset {chunk.offset} ({chunk.offset / _MB:.2f} MB), "
            f"Tamanho {chunk.size} bytes"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())