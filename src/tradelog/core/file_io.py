"""Safe file I/O utilities.

Provides an atomic write for the ledger state document: data goes to a
temporary sibling file, is ``fsync``-ed, then renamed over the target so
a crash mid-write never leaves a truncated document behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, text: str) -> None:
    """Replace *path* with *text* atomically.

    * Parent directories are created as needed.
    * The temporary file lives in the same directory so ``os.replace``
      stays on one filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
