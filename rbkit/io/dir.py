from __future__ import annotations
import errno
import os
from typing import Any, Callable, Iterator, List, Optional, Union

from rbkit.errors import DirectoryNotEmptyError, HomeDirectoryNotFoundError, RemoveDirectoryError

PathLike = Union[str, os.PathLike]


class Dir:
    """
    Open directory handle. The listing is read once on construction; entries
    start with "." and "..". pos / seek / rewind move over that listing.
    Raises FileNotFoundError / NotADirectoryError if `path` is not a directory.
    """

    def __init__(self, path: PathLike) -> None:
        self.path: str = os.fspath(path)
        self._entries: List[str] = [".", ".."] + os.listdir(self.path)
        self._pos: int = 0
        self._fd: Optional[int] = None
        self._closed = False

    @classmethod
    def open(cls, path: PathLike) -> "Dir":
        return cls(path)

    new = open

    @property
    def to_path(self) -> str:
        return self.path

    @property
    def inspect(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"Dir({self.path!r})"

    @property
    def fileno(self) -> int:
        self._check_open()
        if self._fd is None:
            self._fd = os.open(self.path, os.O_RDONLY)
        return self._fd

    @property
    def pos(self) -> int:
        return self._pos

    @pos.setter
    def pos(self, value: int) -> None:
        self.seek(value)

    @property
    def tell(self) -> int:
        return self._pos

    def seek(self, pos: int) -> "Dir":
        self._check_open()
        self._pos = max(0, min(pos, len(self._entries)))
        return self

    def rewind(self) -> "Dir":
        return self.seek(0)

    def read(self) -> Optional[str]:
        """Next entry name, or None at the end of the listing."""
        self._check_open()
        if self._pos >= len(self._entries):
            return None
        name = self._entries[self._pos]
        self._pos += 1
        return name

    def __iter__(self) -> Iterator[str]:
        while True:
            name = self.read()
            if name is None:
                return
            yield name

    def close(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None
        self._closed = True

    def __enter__(self) -> "Dir":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError(f"closed directory: {self.path}")


def getwd() -> str:
    return os.getcwd()


def pwd() -> str:
    return getwd()


def home(user: Optional[str] = None) -> str:
    if user is None:
        return os.path.expanduser("~")
    path = os.path.expanduser(f"~{user}")
    if path == f"~{user}":
        raise HomeDirectoryNotFoundError(user)
    return path


def chdir(path: PathLike = "~", closure: Optional[Callable[[], Any]] = None,
          verbose: bool = False) -> Any:
    """
    Without closure: changes the working directory, returns True on success.
    With closure: changes into `path`, calls closure, restores the previous
    working directory and returns the closure's value.
    """
    target = os.path.expanduser(os.fspath(path))
    if closure is None:
        try:
            os.chdir(target)
        except OSError as e:
            if verbose:
                print(f"[Dir] chdir {target} failed: {e}")
            return False
        if verbose:
            print(f"[Dir] chdir {target}")
        return True

    previous = os.getcwd()
    os.chdir(target)
    if verbose:
        print(f"[Dir] chdir {target} (returning to {previous})")
    try:
        return closure()
    finally:
        os.chdir(previous)


def chroot(path: PathLike) -> bool:
    try:
        os.chroot(path)
    except OSError:
        return False
    return True


def mkdir(path: PathLike, recursive: bool = False, permissions: Optional[int] = None,
          verbose: bool = False) -> None:
    """
    mkdir("work")
    mkdir("work/spool/mail", recursive=True)
    mkdir("work", permissions=0o700)
    """
    created = _missing_dirs(path) if recursive else [os.fspath(path)]
    if recursive:
        os.makedirs(path, exist_ok=True)
    else:
        os.mkdir(path)
    if permissions is not None:
        # os.mkdir modes are filtered through the umask; deepest first so
        # restrictive modes on parents don't block chmod of children
        for d in reversed(created or [os.fspath(path)]):
            os.chmod(d, permissions)
    if verbose:
        mode = f" {permissions:o}" if permissions is not None else ""
        print(f"[Dir] mkdir{' -p' if recursive else ''}{mode} {os.fspath(path)}")


def _missing_dirs(path: PathLike) -> List[str]:
    """Components of `path` that do not exist yet, outermost first."""
    missing: List[str] = []
    current = os.path.abspath(os.fspath(path))
    while not os.path.exists(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return missing[::-1]


def rmdir(path: PathLike, verbose: bool = False) -> None:
    if not is_empty(path):
        raise DirectoryNotEmptyError(errno.ENOTEMPTY, os.strerror(errno.ENOTEMPTY), os.fspath(path))
    try:
        os.rmdir(path)
    except OSError as e:
        raise RemoveDirectoryError(e.errno, e.strerror, os.fspath(path)) from e
    if verbose:
        print(f"[Dir] rmdir {os.fspath(path)}")


unlink = rmdir


def delete(path: PathLike) -> bool:
    try:
        os.rmdir(path)
    except OSError:
        return False
    return True


def is_exist(path: PathLike) -> bool:
    """True if `path` is an existing directory."""
    return os.path.isdir(path)


def is_empty(path: PathLike) -> bool:
    """True for empty directories and for paths that cannot be listed (missing, not a directory)."""
    try:
        return len(os.listdir(path)) == 0
    except OSError:
        return True


def entries(path: PathLike) -> List[str]:
    try:
        return [".", ".."] + os.listdir(path)
    except OSError:
        return []


def foreach(path: PathLike, closure: Callable[[str], Any]) -> None:
    for name in entries(path):
        closure(name)
