# Source access for rendering: read the exact line a finding points at.
# Files are opened per call; nothing is cached between findings.

import logging
from pathlib import Path
from typing import Union

from migcheck.errors import SourceLineError

logger = logging.getLogger(__name__)


def read_specific_line(path: Union[str, Path], target_line: int) -> str:
    """
    Return the text of line `target_line` (1-based) of the file at `path`.

    The line terminator ("\\n", or "\\r\\n") is removed; all other whitespace is
    kept as-is. Bytes that are not valid UTF-8 are replaced rather than
    failing the read.

    Raises:
        SourceLineError: the file cannot be opened or read, or it has fewer
            than `target_line` lines.
    """
    path = Path(path)
    if target_line < 1:
        raise SourceLineError(f"invalid line number {target_line} for {path}")

    try:
        with path.open("rb") as fh:
            for number, raw in enumerate(fh, start=1):
                if number == target_line:
                    return _strip_terminator(raw).decode("utf-8", errors="replace")
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        raise SourceLineError(str(e)) from e

    raise SourceLineError(f"file has fewer than {target_line} lines: {path}")


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw
