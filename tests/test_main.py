import json

import pytest

from substring_bench.algorithms import ALGORITHMS
from substring_bench.main import main


def test_main_prints_report(books, capsys):
    assert main(books + ["-p", "Gatsby", "-p", "Harry"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Substring search algorithm comparison\nProcessing 2 books with 2 patterns:")
    assert "Processing: gatsby.txt" in out
    assert 'Pattern: "Harry"' in out
    for a in ALGORITHMS:
        assert f"  {a.name}: 3 matches, " in out


def test_main_skips_missing_book(books, tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), books[0], "-p", "old sport"]) == 0
    out = capsys.readouterr().out
    assert "Processing: gatsby.txt" in out
    assert "missing.txt" not in out


def test_main_fails_when_no_book_is_read(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "-p", "x"]) == 1


def test_main_writes_json_and_chart(books, tmp_path):
    json_path = tmp_path / "out.json"
    chart_path = tmp_path / "out.png"
    code = main(books + ["-p", "said", "--json", str(json_path), "--chart", str(chart_path)])
    assert code == 0
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["processed"] == ["gatsby.txt", "potter.txt"]
    assert chart_path.exists()


def test_main_no_verify_option(books, capsys):
    assert main(books + ["-p", "Ron", "--no-verify"]) == 0
    assert "Rabin-Karp" in capsys.readouterr().out


def test_main_rejects_bad_worker_count(books):
    with pytest.raises(SystemExit) as exc_info:
        main(books + ["--workers", "0"])
    assert exc_info.value.code == 2


def test_main_runs_repeated_pattern_once(books, capsys):
    assert main([books[1], "-p", "Harry", "-p", "Harry"]) == 0
    out = capsys.readouterr().out
    assert "Processing 1 books with 1 patterns:" in out
    assert out.count('Pattern: "Harry"') == 1
    assert out.count(": 3 matches, ") == len(ALGORITHMS)
