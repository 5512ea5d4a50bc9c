import csv

import pytest

from extrinsic_heap import cli


def write_rows(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_drain_prints_extraction_order(tmp_path, capsys):
    path = write_rows(tmp_path / "tasks.csv", "item,priority\nc,3\na,1\n\nb,2.5\n")
    cli.main(["drain", "--path", path])
    out = capsys.readouterr().out.splitlines()
    assert out == ["  1. a (1)", "  2. b (2.5)", "  3. c (3)"]


def test_drain_applies_changes(tmp_path, capsys):
    path = write_rows(tmp_path / "tasks.csv", "c,3\na,1\nb,2\na,4\n")
    cli.main(["drain", "--path", path, "--change", "a=5", "--change", "c=0"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["  1. c (0)", "  2. b (2)", "  3. a (5)", "  4. a (5)"]


def test_drain_empty_file(tmp_path, capsys):
    path = write_rows(tmp_path / "empty.csv", "item,priority\n")
    cli.main(["drain", "--path", path])
    assert capsys.readouterr().out.strip() == "Heap is empty."


def test_bad_change_argument_exits(tmp_path):
    path = write_rows(tmp_path / "tasks.csv", "a,1\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["drain", "--path", path, "--change", "a=soon"])
    assert exc.value.code == 2


def test_bad_priority_row_exits(tmp_path):
    path = write_rows(tmp_path / "tasks.csv", "a,1\nb,later\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["drain", "--path", path])
    assert exc.value.code == 2


def test_parse_change_splits_on_last_equals():
    assert cli.parse_change("k=v=3") == ("k=v", 3.0)
    with pytest.raises(ValueError):
        cli.parse_change("=3")


def test_bench_writes_report(tmp_path, capsys):
    out_file = tmp_path / "bench.csv"
    cli.main(["bench", "--output", str(out_file), "--base-input", "4", "--steps", "2", "--iterations", "2"])
    with open(out_file, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][0] == "Input Size"
    assert len(rows) == 1 + 4 * 2
    assert {r[1] for r in rows[1:]} == {"insert", "remove_min", "peek", "change_priority"}
    assert "8 rows" in capsys.readouterr().out
