"""
Tests for input collection.

Tests cover:
- Mode detection
- Stdin tokenization
- Token stream assembly
"""

import io
import sys
import pytest
from unittest.mock import MagicMock
from optkit.lib.input import mode_detect, stdin_tokenize, tokens_collect
from optkit.models.dataModel import InputMode


class TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_mode_detect_piped():
    mode = mode_detect(io.StringIO("a b"))
    assert isinstance(mode, InputMode)
    assert mode.has_stdin


def test_mode_detect_terminal():
    assert not mode_detect(TtyStream()).has_stdin


def test_mode_detect_defaults_to_sys_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", MagicMock(isatty=lambda: False))
    assert mode_detect().has_stdin


def test_mode_detect_broken_stream_is_interactive():
    stream = MagicMock()
    stream.isatty.side_effect = ValueError("I/O operation on closed file")
    assert mode_detect(stream) == InputMode(has_stdin=False)


def test_stdin_tokenize_splits_on_any_whitespace():
    assert stdin_tokenize(io.StringIO("one  two\nthree\tfour\n")) == [
        "one",
        "two",
        "three",
        "four",
    ]


def test_stdin_tokenize_read_failure():
    stream = MagicMock()
    stream.read.side_effect = OSError("boom")
    with pytest.raises(IOError, match="Failed to read from stdin"):
        stdin_tokenize(stream)


def test_tokens_collect_appends_piped_input():
    tokens = tokens_collect(["-t", "-e"], io.StringIO("hello foo\n"))
    assert tokens == ["-t", "-e", "hello", "foo"]


def test_tokens_collect_ignores_terminal():
    stream = TtyStream("ignored")
    assert tokens_collect(("argc1", "10"), stream) == ["argc1", "10"]


def test_tokens_collect_empty_pipe():
    assert tokens_collect(["a"], io.StringIO("")) == ["a"]
