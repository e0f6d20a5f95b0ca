"""
Glob resolution and file concatenation helpers.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Sequence, Union

from wcmatch import glob

logger = logging.getLogger(__name__)

GLOB_FLAGS = glob.BRACE | glob.GLOBSTAR | glob.NODIR


class ConcatTextError(Exception):
    """Base error for the concat-text plugin."""


class GlobError(ConcatTextError):
    """Raised when a glob pattern cannot be resolved."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Could not resolve glob '{pattern}': {reason}")
        self.pattern = pattern


async def glob_text_files(pattern: str) -> List[str]:
    """
    Expand a glob pattern into the files it matches.

    Supports ``*``, ``**``, ``?``, character classes and ``{a,b}`` braces.
    The list comes back in the order the filesystem walk produced it.

    Args:
        pattern: Glob pattern, usually absolute

    Returns:
        Matched file paths
    """
    try:
        files = await asyncio.to_thread(glob.glob, pattern, flags=GLOB_FLAGS)
    except (OSError, ValueError) as e:
        raise GlobError(pattern, str(e)) from e

    logger.debug(f"Glob '{pattern}' matched {len(files)} files")
    return files


async def concat_files(paths: Sequence[Union[str, Path]], separator: str = "\n") -> bytes:
    """
    Read every file in order and join their contents.

    Args:
        paths: Files to read, in output order
        separator: Text placed between consecutive files

    Returns:
        The joined bytes. Reading errors propagate as OSError.
    """
    chunks = []
    for path in paths:
        chunks.append(await asyncio.to_thread(Path(path).read_bytes))

    return separator.encode("utf-8").join(chunks)
