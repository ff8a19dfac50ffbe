"""
Async filesystem helpers.

Blocking os calls are pushed to the default executor so that several
candidates can be stat'ed and read at once with asyncio.gather.
"""
import asyncio
import os
from typing import List


async def _run(func, *args):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


async def exists(path: str) -> bool:
    """True if the path exists. Never raises."""
    return await _run(os.path.exists, path)


async def list_dir(path: str) -> List[str]:
    """
    Directory listing in plain string order. Raises OSError if unreadable.

    os.listdir order depends on the filesystem; sorting keeps enumeration
    repeatable across runs. The sort is lexical, so "10" comes before "9".
    """
    names = await _run(os.listdir, path)
    return sorted(names)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


async def read_text(path: str) -> str:
    """Read a whole UTF-8 file. Raises OSError if unreadable."""
    return await _run(_read_text, path)
