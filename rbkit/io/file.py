from __future__ import annotations
from datetime import datetime
import os
from typing import IO, Any, Callable, Optional, Tuple, Union

from rbkit.io.stat import Stat

PathLike = Union[str, os.PathLike]


class File:
    """Thin handle over a Python file object, opened with a C-style mode string ("r", "w", "a+", ...)."""

    def __init__(self, path: PathLike, mode: str = "r") -> None:
        self.path: str = os.fspath(path)
        self.mode = mode
        self._io: IO[Any] = open(self.path, mode)

    @property
    def to_path(self) -> str:
        return self.path

    @property
    def closed(self) -> bool:
        return self._io.closed

    def read(self, size: int = -1) -> Any:
        return self._io.read(size)

    def write(self, data: Any) -> int:
        return self._io.write(data)

    def close(self) -> None:
        self._io.close()

    def __enter__(self) -> "File":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"File(path={self.path!r}, mode={self.mode!r})"

    @classmethod
    def open(cls, path: PathLike, mode: str = "r",
             closure: Optional[Callable[["File"], Any]] = None) -> "File":
        """
        Returns the opened file. If a closure is given it is called with the
        file, and the file is closed afterwards (also when the closure raises).
        """
        f = cls(path, mode)
        if closure is not None:
            try:
                closure(f)
            finally:
                f.close()
        return f

    new = open


def _strip_trailing_sep(path: str) -> str:
    stripped = path.rstrip(os.sep)
    return stripped if stripped else path[:1]


def basename(filename: PathLike, suffix: str = "") -> str:
    """
    basename("/home/work/file.py")          -> "file.py"
    basename("/home/work/file.py", ".py")   -> "file"
    basename("/home/work/file.py", ".*")    -> "file"
    """
    path = _strip_trailing_sep(os.fspath(filename))
    if path == os.sep:
        return path
    base = os.path.basename(path)
    if suffix == ".*":
        stem, _ = _split_ext(base)
        return stem
    if suffix and base.endswith(suffix) and base != suffix:
        return base[: -len(suffix)]
    return base


def dirname(filename: PathLike) -> str:
    return os.path.dirname(_strip_trailing_sep(os.fspath(filename)))


def _split_ext(base: str) -> Tuple[str, str]:
    stem, ext = os.path.splitext(base)
    if ext == ".":
        # trailing period is not an extension
        return base, ""
    return stem, ext


def extname(path: PathLike) -> str:
    """Extension including the leading dot; "" for dotfiles and names ending in a period."""
    base = os.path.basename(_strip_trailing_sep(os.fspath(path)))
    return _split_ext(base)[1]


def expand(path: PathLike, dir: Optional[PathLike] = None) -> str:
    """
    expand("~/file.py")              -> "<home>/file.py"
    expand("file.py", "/usr/bin")    -> "/usr/bin/file.py"
    """
    if dir is not None:
        return absolute_path(os.path.join(os.path.expanduser(os.fspath(dir)), os.fspath(path)))
    return absolute_path(path)


def absolute_path(path: PathLike) -> str:
    return os.path.abspath(os.path.expanduser(os.fspath(path)))


def split(path: PathLike) -> Tuple[str, str]:
    return dirname(path), basename(path)


def join(*paths: PathLike) -> str:
    if not paths:
        return ""
    return os.path.join(*[os.fspath(p) for p in paths])


def is_file(path: PathLike) -> bool:
    return os.path.isfile(path)


def is_directory(path: PathLike) -> bool:
    return os.path.isdir(path)


def is_executable(path: PathLike) -> bool:
    return os.path.exists(path) and os.access(path, os.X_OK)


def is_readable(path: PathLike) -> bool:
    return os.path.exists(path) and os.access(path, os.R_OK)


def is_writable(path: PathLike) -> bool:
    return os.path.exists(path) and os.access(path, os.W_OK)


def is_deletable(path: PathLike) -> bool:
    # removing an entry needs write + search permission on its parent
    if not os.path.lexists(path):
        return False
    parent = os.path.dirname(absolute_path(path))
    return os.access(parent, os.W_OK | os.X_OK)


def is_exist(path: PathLike) -> bool:
    return os.path.exists(path)


def _stat_or_none(path: PathLike) -> Optional[Stat]:
    try:
        return Stat(path)
    except OSError:
        # missing, symlink loop, name too long, permission denied
        return None


def is_block_dev(path: PathLike) -> bool:
    s = _stat_or_none(path)
    return s is not None and s.is_block_dev


def is_char_dev(path: PathLike) -> bool:
    s = _stat_or_none(path)
    return s is not None and s.is_char_dev


def is_zero(path: PathLike) -> bool:
    """True if the file exists and has size zero."""
    s = _stat_or_none(path)
    return s is not None and s.is_zero


def size(path: PathLike) -> int:
    return Stat(path).size


def atime(path: PathLike) -> datetime:
    return Stat(path).atime


def mtime(path: PathLike) -> datetime:
    return Stat(path).mtime


def birthtime(path: PathLike) -> datetime:
    return Stat(path).birthtime


def ftype(path: PathLike) -> str:
    """One of file, directory, characterSpecial, blockSpecial, fifo, link, socket, unknown."""
    return Stat(path, follow_symlinks=False).ftype


def chmod(mode: int, *paths: PathLike, verbose: bool = False) -> int:
    for p in paths:
        os.chmod(p, mode)
        if verbose:
            print(f"[File] chmod {mode:o} {os.fspath(p)}")
    return len(paths)


def delete(*paths: PathLike, verbose: bool = False) -> int:
    for p in paths:
        os.remove(p)
        if verbose:
            print(f"[File] deleted {os.fspath(p)}")
    return len(paths)


unlink = delete


def get_umask() -> int:
    old = os.umask(0)
    os.umask(old)
    return old


def set_umask(mask: int) -> int:
    """Sets the process umask and returns the previous value."""
    return os.umask(mask)
