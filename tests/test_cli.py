"""
tabula_recta — Command-Line Test Suite
======================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

import pytest

from tabula_recta import DEFAULT_KEY, decode, encode
from tabula_recta.__main__ import KEY_ENV_VAR, main


@pytest.fixture(autouse=True)
def _no_env_key(monkeypatch):
    monkeypatch.delenv(KEY_ENV_VAR, raising=False)


def test_cli_encode_argument(capsys):
    assert main(["encode", "AB", "-k", "KEY"]) == 0
    assert capsys.readouterr().out == "lg\n"

def test_cli_decode_argument(capsys):
    assert main(["decode", "lg", "--key", "KEY"]) == 0
    assert capsys.readouterr().out == "AB\n"

def test_cli_default_key(capsys):
    assert main(["encode", "hello"]) == 0
    assert capsys.readouterr().out == encode("hello", DEFAULT_KEY) + "\n"

def test_cli_env_key(capsys, monkeypatch):
    monkeypatch.setenv(KEY_ENV_VAR, "KEY")
    assert main(["encode", "AB"]) == 0
    assert capsys.readouterr().out == "lg\n"

def test_cli_flag_beats_env_key(capsys, monkeypatch):
    monkeypatch.setenv(KEY_ENV_VAR, "other")
    assert main(["encode", "AB", "-k", "KEY"]) == 0
    assert capsys.readouterr().out == "lg\n"

def test_cli_stdin_multiline(capsys, monkeypatch):
    text = "first line\r\nsecond  line\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main(["encode", "-k", "KEY"]) == 0
    out = capsys.readouterr().out
    assert out == encode(text, "KEY")
    assert decode(out, "KEY") == text

def test_cli_decode_html(capsys, monkeypatch):
    ct = encode("a  b\n", "KEY")
    monkeypatch.setattr(sys, "stdin", io.StringIO(ct))
    assert main(["decode", "-k", "KEY", "--html"]) == 0
    assert capsys.readouterr().out == "a&nbsp;&nbsp;b<br>"

def test_cli_invalid_symbol(capsys):
    assert main(["encode", "e\x07llo", "-k", "key"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "U+0007" in captured.err

def test_cli_empty_key(capsys):
    assert main(["encode", "abc", "-k", ""]) == 1
    assert "empty" in capsys.readouterr().err

def test_cli_requires_command():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2

def test_cli_html_only_on_decode():
    with pytest.raises(SystemExit):
        main(["encode", "abc", "--html"])
