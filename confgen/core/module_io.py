"""
Header reading and generated module writing.
"""

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO


def read_header_lines(path: Path) -> list[str]:
    """
    Read a whole header file and split it into lines.

    Bytes that are not UTF-8 survive as surrogates and are written back
    unchanged by write_module.
    """
    return path.read_text(encoding="utf-8", errors="surrogateescape").splitlines()


@contextmanager
def atomic_output(path: Path) -> Iterator[IO[str]]:
    """
    Context manager yielding a text file that replaces path on success.

    Writes go to a temporary file in the destination directory, which is
    renamed over path only when the block exits cleanly. On error the
    temporary file is removed and path is left untouched.

    Args:
        path: Final output path

    Yields:
        Writable text file object
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as handle:
            yield handle
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_module(path: Path, source: str) -> None:
    """Atomically write generated source to path."""
    with atomic_output(path) as handle:
        handle.write(source)
