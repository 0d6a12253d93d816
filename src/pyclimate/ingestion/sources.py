"""Line sources: sequential access to raw lines from files or stdin."""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from pyclimate.exceptions import SourceUnavailableError

_logger = logging.getLogger(__name__)

STDIN_NAME = "-"
_DECODE_ERRORS = "surrogateescape"


def open_lines(path: str | Path, *, encoding: str = "utf-8") -> Iterator[str]:
    """Open *path* and return a lazy iterator over its raw lines.

    The file is opened eagerly so a missing or unreadable path raises
    :class:`SourceUnavailableError` here, before any line is consumed.
    ``"-"`` reads standard input.

    Undecodable bytes are kept as lone surrogates (``surrogateescape``) so
    they only spoil their own line, which the decoder then rejects.
    """
    name = str(path)
    if name == STDIN_NAME:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return iter(sys.stdin)
        return iter(io.TextIOWrapper(buffer, encoding=encoding, errors=_DECODE_ERRORS, newline=""))

    try:
        handle = open(name, encoding=encoding, errors=_DECODE_ERRORS, newline="")  # noqa: SIM115
    except FileNotFoundError as exc:
        raise SourceUnavailableError(f"{name} does not exist", path=name) from exc
    except OSError as exc:
        raise SourceUnavailableError(f"cannot open {name}: {exc.strerror or exc}", path=name) from exc

    _logger.debug("Opened line source %s", name)
    return _iter_handle(handle, name)


def _iter_handle(handle: TextIO, name: str) -> Iterator[str]:
    with handle:
        try:
            yield from handle
        except OSError as exc:
            raise SourceUnavailableError(f"cannot read {name}: {exc}", path=name) from exc
