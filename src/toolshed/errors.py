"""Error definitions for toolshed."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

# ============================================================================
#                               General errors
# ============================================================================


class ToolshedError(Exception):
    """Base class for toolshed errors."""


# ============================================================================
#                           Atomic write errors
# ============================================================================


class AtomicWriteError(ToolshedError):
    """Raised when an atomic write could not install the destination file.

    The underlying exception is always available as ``__cause__``. The
    destination path is never left partially written.
    """

    stage = "write"

    def __init__(self, path: Path, temp_path: Path | None = None) -> None:
        super().__init__(f"Atomic {self.stage} of '{path}' failed.")
        self.path = path
        self.temp_path = temp_path


class DirectoryCreateError(AtomicWriteError):
    """Raised when the missing parent directory could not be created."""

    stage = "directory creation"


class WriterFailedError(AtomicWriteError):
    """Raised when the content writer raised while filling the temp file."""

    stage = "content write"


class CloseFailedError(AtomicWriteError):
    """Raised when the temp file could not be flushed and closed."""

    stage = "close"


class RenameFailedError(AtomicWriteError):
    """Raised when the temp file could not be renamed onto the destination."""

    stage = "rename"


# ============================================================================
#                           Parsing / config errors
# ============================================================================


class DurationParseError(ToolshedError, ValueError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, text: str, reason: str = "invalid duration") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class InvalidFileModeError(ToolshedError, ValueError):
    """Raised when a configured file mode is not a valid octal permission."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid file mode {value!r} (expected octal, e.g. 644).")
        self.value = value
