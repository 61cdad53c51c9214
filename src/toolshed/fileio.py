"""Atomic file persistence and path resolution.

The writer never exposes a partially written destination: content goes to a
hidden temporary file created next to the destination (same directory, hence
same filesystem) and is moved into place with `os.replace` only once it has
been written and closed successfully.

Exports
-------
- write_atomic:  Run a writer callable against a temp file, then install it.
- save_bytes:    Atomically write a bytes payload.
- save_json:     Atomically write a value as JSON (streamed, not pre-rendered).
- load_json:     Read JSON back, optionally into a dataclass type.
- resolve_path:  Resolve an existing path or a glob pattern.
- resolve_files: Like `resolve_path`, restricted to regular files.

Concurrency
-----------
Calls block on the calling thread. Temp names are unique per call, so
concurrent writers never share an in-flight file, but two writers targeting
the same destination are not coordinated: the last rename wins.

Typical usage
-------------
    save_json("state/settings.json", {"retries": 3}, pretty=True)
    settings = load_json("state/settings.json")

    def write(sink):
        for chunk in producer():
            sink.write(chunk)

    write_atomic("out/report.bin", write, mode=0o600)
"""

from __future__ import annotations

import codecs
import errno
import glob
import json
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, TypeVar, overload

from toolshed.config import DEFAULT_FILE_MODE
from toolshed.errors import (
    CloseFailedError,
    DirectoryCreateError,
    RenameFailedError,
    WriterFailedError,
)
from toolshed.structs import dict_to_dataclass, to_jsonable

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]
Writer = Callable[[IO[bytes]], object]

D = TypeVar("D")

GLOB_CHARS = "*?["
JSON_INDENT = 2
COMPACT_SEPARATORS = (",", ":")


# ============================================================================
#                               Atomic writer
# ============================================================================


def directory_mode(mode: int) -> int:
    """Derive directory permissions from file permissions.

    Every class that may read the file is also allowed to traverse the
    directory: read bits are shifted into the executable bits.

    Example:
        ``directory_mode(0o640) == 0o750``
    """
    return mode | ((mode & 0o444) >> 2)


def _create_temp(path: Path) -> tuple[IO[bytes], Path]:
    fd, name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}")
    return os.fdopen(fd, "wb"), Path(name)


def _discard(temp_path: Path) -> None:
    # Best-effort cleanup on an already-failing path: the outcome is ignored,
    # so a failing unlink leaves one hidden temp file behind.
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Could not remove temporary file %s: %s", temp_path, e)


def _abandon(sink: IO[bytes], temp_path: Path) -> None:
    try:
        sink.close()
    except OSError as e:
        logger.debug("Could not close temporary file %s: %s", temp_path, e)
    _discard(temp_path)


def write_atomic(
    path: PathLike,
    writer: Writer,
    mode: int = DEFAULT_FILE_MODE,
    *,
    fsync: bool = False,
) -> None:
    """Write a file atomically by filling a temp file and renaming it into place.

    If the destination's parent directory is missing, exactly one directory
    level is created (permissions from `directory_mode`) and temp-file creation
    is retried once. Deeper missing hierarchies are not created.

    Args:
        path: Destination path.
        writer: Callable receiving the binary temp file; raising aborts the write.
        mode: Permission bits applied to the installed file.
        fsync: Flush the temp file to stable storage before it is renamed.

    Raises:
        ValueError: If `path` is empty.
        DirectoryCreateError: If the missing parent directory could not be created,
            for example because more than one level is missing.
        WriterFailedError: If `writer` raised.
        CloseFailedError: If applying `mode`, syncing or closing the temp file failed.
        RenameFailedError: If the temp file could not replace the destination.
        OSError: If the temp file could not be created for any other reason.

    Note:
        On every error path the destination is left untouched and the temp
        file is removed on a best-effort basis.
    """
    if not os.fspath(path):
        raise ValueError("Destination path must not be empty")
    path = Path(path)

    try:
        sink, temp_path = _create_temp(path)
    except FileNotFoundError:
        try:
            path.parent.mkdir(mode=directory_mode(mode), exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(path) from e
        logger.debug("Created missing directory %s", path.parent)
        sink, temp_path = _create_temp(path)

    try:
        writer(sink)
    except Exception as e:
        _abandon(sink, temp_path)
        raise WriterFailedError(path, temp_path) from e
    except BaseException:
        _abandon(sink, temp_path)
        raise

    try:
        os.chmod(temp_path, mode)
        if fsync:
            sink.flush()
            os.fsync(sink.fileno())
        sink.close()
    except OSError as e:
        _abandon(sink, temp_path)
        raise CloseFailedError(path, temp_path) from e

    try:
        os.replace(temp_path, path)
    except OSError as e:
        _discard(temp_path)
        raise RenameFailedError(path, temp_path) from e

    logger.debug("Atomically wrote %s", path)


def save_bytes(path: PathLike, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Atomically write `data` to `path`, see `write_atomic`."""

    def write(sink: IO[bytes]) -> None:
        sink.write(data)

    write_atomic(path, write, mode)


def save_json(
    path: PathLike, value: Any, pretty: bool = False, mode: int = DEFAULT_FILE_MODE
) -> None:
    """Atomically write `value` as JSON to `path`.

    The value is encoded straight into the temp file. Dataclass instances are
    encoded as objects. Output is UTF-8 and ends with a newline.

    Args:
        path: Destination path.
        value: Any JSON-serializable value.
        pretty: Indent nested levels by two spaces; otherwise compact.
        mode: Permission bits applied to the installed file.

    Raises:
        WriterFailedError: If `value` is not serializable (cause is the `TypeError`
            or `ValueError` raised by `json`).
    """

    def write(sink: IO[bytes]) -> None:
        stream = codecs.getwriter("utf-8")(sink)
        if pretty:
            json.dump(
                value, stream, indent=JSON_INDENT, ensure_ascii=False, default=to_jsonable
            )
        else:
            json.dump(
                value,
                stream,
                separators=COMPACT_SEPARATORS,
                ensure_ascii=False,
                default=to_jsonable,
            )
        stream.write("\n")

    write_atomic(path, write, mode)


@overload
def load_json(path: PathLike, into: None = None) -> Any: ...
@overload
def load_json(path: PathLike, into: type[D]) -> D: ...
def load_json(path: PathLike, into: type[D] | None = None) -> D | Any:
    """Decode JSON read from `path`.

    Args:
        path: File to read.
        into: Optional dataclass type; the decoded object is rebuilt into it.

    Returns:
        The decoded value, or an instance of `into`.

    Raises:
        FileNotFoundError: If `path` does not exist (or any other `OSError` on open).
        json.JSONDecodeError: If the content is not valid JSON.
        TypeError: If `into` is given but the document is not a JSON object.
    """
    with open(path, encoding="utf-8") as fp:
        value = json.load(fp)
    if into is None:
        return value
    if not isinstance(value, dict):
        raise TypeError(
            f"Cannot decode {type(value).__name__} from '{path}' into {into.__name__}"
        )
    return dict_to_dataclass(into, value)


# ============================================================================
#                               Path resolution
# ============================================================================


def resolve_path(path: PathLike) -> list[Path]:
    """Resolve an existing path or a glob pattern.

    Args:
        path: A path or glob pattern (``*``, ``?``, ``[...]``).

    Returns:
        ``[path]`` when the (normalized) path exists; otherwise the existing
        glob matches in sorted order. Matches whose name starts with a dot are
        skipped unless the pattern's own base name starts with a dot.

    Raises:
        FileNotFoundError: If the path does not exist and is not a glob pattern.
    """
    cleaned = os.path.normpath(path)
    if os.path.exists(cleaned):
        return [Path(cleaned)]
    if not any(c in cleaned for c in GLOB_CHARS):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), cleaned)

    skip_dot = not os.path.basename(cleaned).startswith(".")
    paths: list[Path] = []
    for match in sorted(glob.glob(cleaned, include_hidden=True)):
        if not os.path.exists(match):
            continue
        if skip_dot and os.path.basename(match).startswith("."):
            continue
        paths.append(Path(match))
    return paths


def resolve_files(path: PathLike) -> list[Path]:
    """Resolve `path` (see `resolve_path`) to the regular files among the results."""
    return [p for p in resolve_path(path) if p.is_file()]
