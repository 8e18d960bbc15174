"""Writing generated source to a file or a stream."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from ifacegen.domain.exceptions.output import WriteError

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

logger = logging.getLogger(__name__)

# permission bits of a newly created output file
FILE_MODE = 0o600


def write_source(path: Path | None, text: str, stream: TextIO) -> None:
    """Write text to path, or to stream when path is None.

    Raises:
        WriteError: If writing fails
    """
    if path is None:
        try:
            stream.write(text)
            stream.flush()
        except OSError as e:
            raise WriteError(None, e.strerror or str(e)) from e
        return

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise WriteError(path, e.strerror or str(e)) from e

    logger.debug("wrote %d bytes to %s", len(text.encode("utf-8")), path)
