from __future__ import annotations
from datetime import datetime
import os
import stat as st
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


class Stat:
    """Snapshot of os.stat / os.lstat for one path. Raises FileNotFoundError if missing."""

    def __init__(self, path: PathLike, follow_symlinks: bool = True) -> None:
        self.path = Path(path)
        self._st = os.stat(self.path, follow_symlinks=follow_symlinks)

    @property
    def size(self) -> int:
        return self._st.st_size

    @property
    def mode(self) -> int:
        return self._st.st_mode

    @property
    def atime(self) -> datetime:
        return datetime.fromtimestamp(self._st.st_atime)

    @property
    def mtime(self) -> datetime:
        return datetime.fromtimestamp(self._st.st_mtime)

    @property
    def ctime(self) -> datetime:
        return datetime.fromtimestamp(self._st.st_ctime)

    @property
    def birthtime(self) -> datetime:
        # st_birthtime only exists on macOS/BSD (and Windows on 3.12+)
        ts = getattr(self._st, "st_birthtime", None)
        if ts is None:
            ts = self._st.st_ctime
        return datetime.fromtimestamp(ts)

    @property
    def is_file(self) -> bool:
        return st.S_ISREG(self.mode)

    @property
    def is_directory(self) -> bool:
        return st.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return st.S_ISLNK(self.mode)

    @property
    def is_block_dev(self) -> bool:
        return st.S_ISBLK(self.mode)

    @property
    def is_char_dev(self) -> bool:
        return st.S_ISCHR(self.mode)

    @property
    def is_fifo(self) -> bool:
        return st.S_ISFIFO(self.mode)

    @property
    def is_socket(self) -> bool:
        return st.S_ISSOCK(self.mode)

    @property
    def is_zero(self) -> bool:
        return self.size == 0

    @property
    def ftype(self) -> str:
        if self.is_file:
            return "file"
        if self.is_directory:
            return "directory"
        if self.is_char_dev:
            return "characterSpecial"
        if self.is_block_dev:
            return "blockSpecial"
        if self.is_fifo:
            return "fifo"
        if self.is_symlink:
            return "link"
        if self.is_socket:
            return "socket"
        return "unknown"
