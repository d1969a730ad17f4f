import random

import pytest

from persistguard.chunkscan import (
    MAX_ANALYSIS_CHUNKS,
    MAX_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    AnalysisPlan,
    analyze_file_chunks,
    chunk_offsets,
    get_analysis_plan,
    main,
)

MB = 1024 * 1024


def _sized_file(path, size):
    with open(path, "wb") as handle:
        handle.truncate(size)
    return path


def test_small_file_gets_minimum_chunk_and_no_chunks(tmp_path):
    plan = get_analysis_plan(_sized_file(tmp_path / "small", 1000))
    assert plan.total_size == 1000
    assert plan.chunk_size == MIN_CHUNK_SIZE
    assert plan.chunks_to_analyze == 0


def test_medium_file_plan_invariants(tmp_path):
    plan = get_analysis_plan(_sized_file(tmp_path / "medium", 10 * MB))
    assert plan.coverage_ratio == 0.1
    assert plan.chunks_to_analyze == 3
    assert MIN_CHUNK_SIZE <= plan.chunk_size <= MAX_CHUNK_SIZE
    assert plan.chunk_size * plan.chunks_to_analyze <= plan.total_size * plan.coverage_ratio


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        get_analysis_plan(tmp_path / "missing")


def test_offsets_start_middle_end_then_random():
    plan = AnalysisPlan("unused", total_size=1000, chunks_to_analyze=6, chunk_size=100)
    offsets = list(chunk_offsets(plan, random.Random(1)))
    assert offsets[:3] == [0, 500, 900]
    assert len(offsets) == 6
    assert all(0 <= offset < 900 for offset in offsets[3:])


def test_offsets_are_reproducible_with_seed():
    plan = AnalysisPlan("unused", total_size=5000, chunks_to_analyze=10, chunk_size=10)
    first = list(chunk_offsets(plan, random.Random(42)))
    second = list(chunk_offsets(plan, random.Random(42)))
    assert first == second


def test_analyze_reads_file_content(tmp_path):
    data = bytes(range(256)) * 40
    target = tmp_path / "data.bin"
    target.write_bytes(data)
    plan = AnalysisPlan(str(target), total_size=len(data), chunks_to_analyze=5, chunk_size=512)
    chunks = analyze_file_chunks(plan, random.Random(7))
    assert [chunk.index for chunk in chunks] == [1, 2, 3, 4, 5]
    for chunk in chunks:
        assert chunk.data == data[chunk.offset:chunk.offset + plan.chunk_size]
        assert chunk.size == len(chunk.data)
    assert chunks[2].offset + chunks[2].size == len(data)


def test_analyze_missing_file_raises(tmp_path):
    plan = AnalysisPlan(str(tmp_path / "gone"), total_size=10, chunks_to_analyze=1, chunk_size=5)
    with pytest.raises(OSError):
        analyze_file_chunks(plan)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Uso:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Erro ao obter" in capsys.readouterr().err


def test_main_reports_chunks(tmp_path, capsys):
    target = _sized_file(tmp_path / "medium", 10 * MB)
    assert main([str(target)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Analisando {target}")
    assert out.count("Chunk ") == 3