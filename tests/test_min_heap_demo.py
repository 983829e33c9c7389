import io

import pytest

from dsakit.min_heap_demo import main, run_demo

SAMPLE = [6, 7, 3, 1, 5, 4, 2]


def test_insert_lines_follow_sample():
    transcript = run_demo(SAMPLE, 2)
    assert transcript.startswith("Heap: 6 \nHeap: 6 7 \nHeap: 3 7 6 \n")
    assert "Heap: 1 3 6 7 \n" in transcript
    assert "Heap: 1 3 4 7 5 6 \n" in transcript


def test_initial_heap_matches_sample():
    transcript = run_demo(SAMPLE, 2)
    assert "Initial Heap:\n1 3 2 7 5 6 4 \n" in transcript


def test_extractions_match_sample():
    transcript = run_demo(SAMPLE, 2)
    assert "The smallest data in the heap: 1\nHeap: 2 3 4 7 5 6 \n" in transcript
    assert "The smallest data in the heap: 2\nHeap: 3 5 4 7 6 \n" in transcript
    assert transcript.endswith("Final Heap: \n3 5 4 7 6 \n\n")


def test_empty_heap_reports_errors():
    transcript = run_demo([], 2)
    assert transcript.count("Error! Heap is empty.") == 2
    assert transcript.endswith("Final Heap: \n(Empty)\n\n")


def test_extract_more_than_available():
    transcript = run_demo([5], 3)
    assert transcript.count("The smallest data in the heap: 5") == 1
    assert transcript.count("Error! Heap is empty.") == 2


def test_negative_extract_count_rejected():
    with pytest.raises(ValueError):
        run_demo([1, 2], -1)


def test_main_with_arguments(capsys):
    assert main(["6", "7", "3"]) == 0
    out = capsys.readouterr().out
    assert out == run_demo([6, 7, 3], 2)


def test_main_reads_stdin_until_sentinel(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 7 3 -1 9"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == run_demo([6, 7, 3], 2)


def test_main_rejects_bad_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 x"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_main_rejects_negative_extract(capsys):
    assert main(["--extract", "-2", "1"]) == 1
    assert "Invalid input" in capsys.readouterr().err