"""Unit tests for the gofmt formatter adapter."""

import subprocess
from unittest.mock import patch

import pytest

from argnewline.core.gofmt import GofmtFormatter
from argnewline.errors import FormatError, FormatterUnavailableError


def _completed(returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=["gofmt"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGofmtFormatter:
    def test_uses_configured_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARGNEWLINE_GOFMT", "gofmt -s")
        assert GofmtFormatter().command == ["gofmt", "-s"]

    def test_explicit_command_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARGNEWLINE_GOFMT", "gofmt -s")
        assert GofmtFormatter(["/usr/local/go/bin/gofmt"]).command == ["/usr/local/go/bin/gofmt"]

    def test_pipes_source_through_stdin(self) -> None:
        with patch("argnewline.core.gofmt.subprocess.run", return_value=_completed(0, b"formatted\n")) as run:
            assert GofmtFormatter(["gofmt"])(b"package main\n") == b"formatted\n"
        args, kwargs = run.call_args
        assert args[0] == ["gofmt"]
        assert kwargs["input"] == b"package main\n"
        assert kwargs["check"] is False

    def test_non_zero_exit_raises_with_stderr(self) -> None:
        stderr = b"<standard input>:3:1: expected declaration, found foo\n"
        with patch("argnewline.core.gofmt.subprocess.run", return_value=_completed(2, stderr=stderr)):
            with pytest.raises(FormatError, match="expected declaration"):
                GofmtFormatter(["gofmt"])(b"foo")

    def test_non_zero_exit_without_stderr(self) -> None:
        with patch("argnewline.core.gofmt.subprocess.run", return_value=_completed(3)):
            with pytest.raises(FormatError, match="exited with status 3"):
                GofmtFormatter(["gofmt"])(b"foo")

    def test_missing_executable_raises(self) -> None:
        with patch("argnewline.core.gofmt.subprocess.run", side_effect=FileNotFoundError("gofmt")):
            with pytest.raises(FormatterUnavailableError):
                GofmtFormatter(["gofmt"])(b"package main\n")

    def test_ensure_available(self) -> None:
        with pytest.raises(FormatterUnavailableError):
            GofmtFormatter(["argnewline-no-such-formatter"]).ensure_available()

    def test_unavailable_is_a_format_error(self) -> None:
        assert issubclass(FormatterUnavailableError, FormatError)
