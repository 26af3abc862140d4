# src/e2e/test_cli_main.py

import json
import os
from pathlib import Path

import pytest

from focusindex import config as CFG
from focusindex.__main__ import main

OPEN = ["src/a/index.ts", "src/b/index.ts", "README.md"]


def _answers(monkeypatch, *lines):
    it = iter(lines)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", _input)


@pytest.mark.e2e
def test_list_prints_numbered_labels(capsys):
    assert main(["--list", *OPEN]) == 0
    assert capsys.readouterr().out == "1: a/index.ts\n2: b/index.ts\n3: README.md\n"


@pytest.mark.e2e
def test_json_rows(capsys):
    assert main(["--json", *OPEN]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["label"] for r in rows] == ["a/index.ts", "b/index.ts", "README.md"]
    assert rows[1]["path"] == "src/b/index.ts"
    assert rows[1]["index"] == 2


@pytest.mark.e2e
def test_pick_by_digit_and_label(capsys):
    assert main(["--pick", "2", *OPEN]) == 0
    assert capsys.readouterr().out.strip() == "src/b/index.ts"
    assert main(["--pick", "a/index.ts", *OPEN]) == 0
    assert capsys.readouterr().out.strip() == "src/a/index.ts"


@pytest.mark.e2e
def test_pick_failure_reports_generic_error(capsys):
    assert main(["--pick", "nothing-here", *OPEN]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert CFG.SELECTION_ERROR_MESSAGE in captured.err


@pytest.mark.e2e
def test_paths_from_file(tmp_path: Path, capsys):
    tabs = tmp_path / "tabs.txt"
    tabs.write_text("\n".join(OPEN) + "\n", encoding="utf-8")
    assert main(["--from", str(tabs), "--list"]) == 0
    assert capsys.readouterr().out.splitlines()[2] == "3: README.md"


@pytest.mark.e2e
def test_no_paths_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


@pytest.mark.e2e
def test_malformed_path_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--list", "a/x.ts", "dir/"])
    assert exc.value.code == 2


@pytest.mark.e2e
def test_repl_narrows_until_one_item_left(monkeypatch, capsys):
    _answers(monkeypatch, "index", "b/")
    assert main(OPEN) == 0
    out = capsys.readouterr().out
    assert CFG.PLACEHOLDER in out
    assert out.strip().splitlines()[-1] == "src/b/index.ts"


@pytest.mark.e2e
def test_repl_digit_jump(monkeypatch, capsys):
    _answers(monkeypatch, "3")
    assert main(OPEN) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "README.md"


@pytest.mark.e2e
def test_repl_no_matches_then_quit(monkeypatch, capsys):
    _answers(monkeypatch, "zzz", "")
    assert main(OPEN) == 0
    assert "(no matches)" in capsys.readouterr().out


@pytest.mark.e2e
def test_repl_out_of_range_digit_does_nothing(monkeypatch, capsys):
    _answers(monkeypatch, "4", "")
    assert main(["src/f4.py", "b.py", "c.py"]) == 0
    out = capsys.readouterr().out
    assert "src/f4.py" not in out.splitlines()
    assert "(no matches)" in out


@pytest.mark.e2e
def test_verbose_does_not_leak_into_environment(monkeypatch, capsys):
    monkeypatch.delenv("FOCUSINDEX_VERBOSE", raising=False)
    assert main(["--verbose", "--list", *OPEN]) == 0
    assert "[loaded] paths=3" in capsys.readouterr().out
    assert "FOCUSINDEX_VERBOSE" not in os.environ
