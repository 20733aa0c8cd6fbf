import shutil
import subprocess
from collections.abc import Callable, Sequence

from argnewline.config import get_gofmt_command
from argnewline.errors import FormatError, FormatterUnavailableError

Formatter = Callable[[bytes], bytes]


class GofmtFormatter:
    """Canonical formatter backed by the ``gofmt`` executable (stdin -> stdout)."""

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self._command = list(command) if command else get_gofmt_command()

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def ensure_available(self) -> None:
        if shutil.which(self._command[0]) is None:
            raise FormatterUnavailableError(f"Formatter executable not found: {self._command[0]}")

    def __call__(self, source: bytes) -> bytes:
        try:
            result = subprocess.run(
                self._command,
                input=source,
                check=False,
                capture_output=True,
            )
        except FileNotFoundError as exc:
            raise FormatterUnavailableError(f"Formatter executable not found: {self._command[0]}") from exc
        if result.returncode != 0:
            message = result.stderr.decode("utf-8", errors="replace").strip()
            raise FormatError(message or f"{self._command[0]} exited with status {result.returncode}")
        return result.stdout
