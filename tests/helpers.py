"""Helpers shared by unit and integration tests."""

import shutil

import pytest

from argnewline.core.syntax import CompilationUnit, parse_source

requires_gofmt = pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt is not installed")


def identity_formatter(source: bytes) -> bytes:
    """Stand-in for gofmt: returns the spliced text unchanged."""
    return source


def go_unit(source: str) -> CompilationUnit:
    return parse_source(source.encode("utf-8"))
