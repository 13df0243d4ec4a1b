"""Document Source - Enumerates candidate files under a corpus root."""

import logging
import os
from pathlib import Path
from typing import Iterator

from oas_conformance.errors import SourceRootError
from oas_conformance.schemas.outcome import Format

logger = logging.getLogger(__name__)

SUFFIXES: dict[str, Format] = {
    ".yaml": Format.YAML,
    ".json": Format.JSON,
}


def sniff_format(path: str | Path) -> Format:
    """Classify a file by the suffix of its name. No I/O is performed."""
    name = os.path.basename(os.fspath(path))
    for suffix, fmt in SUFFIXES.items():
        if name.endswith(suffix):
            return fmt
    return Format.IGNORED


def iter_files(root: str | Path) -> Iterator[Path]:
    """Lazily yield every regular file below ``root``.

    Symlinks and special files are dropped. Entries that cannot be inspected
    are skipped without being reported.

    Raises:
        SourceRootError: If ``root`` is not a directory. Raised immediately,
            not on first iteration.
    """
    root = Path(root)
    if not root.is_dir():
        raise SourceRootError(f"Corpus root is not a directory: {root}")
    return _walk(root)


def _walk(root: Path) -> Iterator[Path]:
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(Path(entry.path))
                        elif entry.is_file(follow_symlinks=False):
                            yield Path(entry.path)
                    except OSError as e:
                        logger.debug(f"Skipping {entry.path}: {e}")
        except OSError as e:
            logger.debug(f"Skipping directory {directory}: {e}")
