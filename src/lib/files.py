"""
Idempotent output files

write_updated() rewrites a file only when its content differs, and reports
whether it did. Regeneration workflows use the result to fail CI when
committed documentation is out of date:

    assert not write_updated("docs/tool.1", page), "Regenerated docs, commit them"
"""

from pathlib import Path
from typing import Union

from .log import LOG


def write_updated(path: Union[str, Path], content: Union[bytes, str]) -> bool:
    """
    Update file contents if needed

    Args:
        path: File to update, created when missing
        content: New contents; str is encoded as UTF-8

    Returns:
        True if the file was (re)written, False if it already matched

    Raises:
        OSError: on any file IO error
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    with open(path, "a+b") as handle:
        handle.seek(0)
        current = handle.read()
        if current == content:
            LOG(f"Unchanged: {path}", level=3)
            return False
        handle.seek(0)
        handle.truncate()
        handle.write(content)

    LOG(f"Wrote {path}", level=2)
    return True
