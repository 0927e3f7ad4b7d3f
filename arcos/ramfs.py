"""A flat in-memory filesystem with a fixed number of slots."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_FILES = 128
MAX_NAME = 64
MAX_PATH = 256
FILE_SIZE = 4096


class RamFSError(Exception):
    """Raised when a filesystem operation cannot be carried out."""


def normalize_path(path: str) -> str:
    """Drop a leading slash, collapse repeated slashes and drop a trailing one."""
    out: list[str] = []
    for i, ch in enumerate(path):
        if len(out) >= MAX_NAME - 1:
            break
        if ch == "/" and (i == 0 or (out and out[-1] == "/")):
            continue
        out.append(ch)
    if len(out) > 1 and out[-1] == "/":
        out.pop()
    return "".join(out)


@dataclass
class RamFile:
    """One entry in the filesystem: a file with bounded contents, or a directory."""

    name: str
    is_dir: bool = False
    capacity: int = 0
    data: bytes = field(default=b"", repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


class RamFS:
    """Fixed-size table of files and directories addressed by full path."""

    def __init__(self) -> None:
        self._slots: list[RamFile | None] = []
        self._allocated = 0
        self.reset()

    def reset(self) -> None:
        """Empty the filesystem and recreate the root directory."""
        self._slots = [None] * MAX_FILES
        self._allocated = 0
        self.mkdir("/")

    def _find(self, name: str) -> int | None:
        for index, entry in enumerate(self._slots):
            if entry is not None and entry.name == name:
                return index
        return None

    def _free_slot(self) -> int:
        for index, entry in enumerate(self._slots):
            if entry is None:
                return index
        raise RamFSError("no free file slots")

    def _lookup(self, path: str) -> RamFile:
        index = self._find(normalize_path(path))
        if index is None:
            raise RamFSError(f"no such file or directory: {path}")
        return self._slots[index]

    def mkdir(self, path: str) -> None:
        """Create a directory; raise if the path exists or the table is full."""
        name = normalize_path(path)
        if self._find(name) is not None:
            raise RamFSError(f"already exists: {path}")
        self._slots[self._free_slot()] = RamFile(name=name, is_dir=True)

    def create_file(self, path: str) -> None:
        """Create an empty file, or truncate the entry if it already exists."""
        name = normalize_path(path)
        existing = self._find(name)
        if existing is not None:
            self._slots[existing].data = b""
            return
        slot = self._free_slot()
        if self._allocated >= MAX_FILES:
            raise RamFSError("out of file storage")
        self._slots[slot] = RamFile(name=name, capacity=FILE_SIZE)
        self._allocated += 1

    def write(self, path: str, data: bytes) -> None:
        """Replace a file's contents, creating it if needed; data beyond capacity is dropped."""
        name = normalize_path(path)
        index = self._find(name)
        if index is None:
            self.create_file(name)
            index = self._find(name)
            if index is None:
                raise RamFSError(f"cannot create file: {path}")
        entry = self._slots[index]
        if entry.is_dir:
            raise RamFSError(f"is a directory: {path}")
        entry.data = bytes(data[:entry.capacity])

    def read(self, path: str, max_size: int | None = None) -> bytes:
        """Return a file's contents, at most ``max_size`` bytes of them."""
        entry = self._lookup(path)
        if entry.is_dir:
            raise RamFSError(f"is a directory: {path}")
        if max_size is None:
            return entry.data
        return entry.data[:max_size]

    def list(self, path: str) -> list[str]:
        """Names of the entries under ``path``, directories ending in a slash."""
        base = normalize_path(path)
        names: list[str] = []
        for entry in self._slots:
            if entry is None:
                continue
            if base == "/":
                name = entry.name
                slash = name.find("/")
                if slash == -1 or (slash == 0 and "/" not in name[1:]):
                    display = name
                else:
                    continue
            else:
                if not entry.name.startswith(base + "/"):
                    continue
                display = entry.name[len(base) + 1:]
            names.append(display + "/" if entry.is_dir else display)
        return names

    def delete(self, path: str) -> None:
        """Remove a file or directory; the root cannot be removed."""
        name = normalize_path(path)
        index = self._find(name)
        if index is None:
            raise RamFSError(f"no such file or directory: {path}")
        if name == "/":
            raise RamFSError("cannot remove the root directory")
        self._slots[index] = None

    def exists(self, path: str) -> bool:
        return self._find(normalize_path(path)) is not None

    def size(self, path: str) -> int:
        """Size of a file in bytes, or 0 if there is no such entry."""
        index = self._find(normalize_path(path))
        if index is None:
            return 0
        return self._slots[index].size