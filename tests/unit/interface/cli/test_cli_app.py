from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process to check exit codes, stdout content and the
warnings raised for option combinations that have no effect.
"""

import logging

import pytest

from folder_tree.infra.logging import shutdown_logging
from folder_tree.interface.cli import app


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers bound to the captured stderr of each test."""
    yield
    shutdown_logging()


def test_tree_argument_renders_given_structure(capsys):
    code = app.main(["--tree", '{"docs": ["a.txt", {"img": ["b.png"]}]}'])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "docs",
        "    a.txt",
        "    img",
        "        b.png",
    ]


def test_invalid_tree_shape_exits_with_one(capsys):
    code = app.main(["--tree", '{"a": [], "b": []}'])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "exactly one key" in captured.err


def test_malformed_tree_json_exits_with_two(capsys):
    code = app.main(["--tree", "{oops"])

    captured = capsys.readouterr()
    assert code == 2
    assert "not valid JSON" in captured.err


def test_keyboard_interrupt_exits_with_130(monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "print_tree", interrupted)

    assert app.main([]) == 130


def test_indent_with_ascii_style_is_reported(caplog, capsys):
    with caplog.at_level(logging.WARNING):
        code = app.main(["--style", "ascii", "--indent", "2"])

    assert code == 0
    assert "--indent is ignored with the ascii style" in caplog.text
    assert capsys.readouterr().out.splitlines()[1] == "├── document.txt"


def test_with_photo_and_custom_tree_is_reported(caplog, capsys):
    with caplog.at_level(logging.WARNING):
        code = app.main(["--tree", '"solo.txt"', "--with-photo"])

    assert code == 0
    assert "--with-photo only applies to the sample tree" in caplog.text
    assert capsys.readouterr().out == "solo.txt\n"
