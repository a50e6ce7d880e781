import io
import sys
from unittest import mock

import pytest

from ashfall.game import main
from ashfall.nodes import get_node


def test_main_prints_title_and_intro(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with mock.patch("time.sleep"):
        code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("=== Terminal Survival ===\n")
    assert get_node(0).text in out


def test_main_reports_missing_node_after_exploration(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a\na\n\nb\n\nc\n\nd\n\n\n"))
    with mock.patch("time.sleep"):
        code = main([])
    captured = capsys.readouterr()
    assert code == 1
    assert "11" in captured.err
    assert get_node(6).text in captured.out


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "ashfall" in capsys.readouterr().out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2