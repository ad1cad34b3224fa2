"""Uniform read access to timetable files: directories, ZIP archives, memory."""

from __future__ import annotations

import enum
import hashlib
import io
import os
import zipfile
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath
from typing import Union

from nigiri.log import LogLevel, log

PathLike = Union[str, "os.PathLike[str]"]

_MEMORY_PATH = "::memory::"


class DirType(enum.Enum):
    FILESYSTEM = "filesystem"
    ZIP = "zip"
    IN_MEMORY = "in_memory"


@dataclass(frozen=True)
class File:
    """A named file and its complete contents."""

    path: str
    content: bytes

    def data(self) -> bytes:
        return self.content


def _as_text(p: PathLike) -> str:
    if isinstance(p, PurePath):
        return p.as_posix()
    return os.fspath(p)


def normalize(p: PathLike) -> str:
    """Join the components of ``p`` with ``/``, dropping ``.`` components.

    A trailing separator is kept.
    """
    text = _as_text(p)
    pieces = [x for x in text.split("/") if x not in ("", ".")]
    result = "/".join(pieces)
    if text.startswith("/"):
        result = "/" + result
    if text.endswith("/") and pieces:
        result += "/"
    return result


def _hash64(data: bytes, seed: int) -> int:
    h = hashlib.blake2b(digest_size=8)
    h.update(seed.to_bytes(8, "little"))
    h.update(data)
    return int.from_bytes(h.digest(), "little")


def _to_bytes(content: str | bytes) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


class Dir(ABC):
    """A read-only collection of files addressed by relative paths."""

    def __init__(self, path: PathLike) -> None:
        self.path = path

    @abstractmethod
    def list_files(self, p: PathLike) -> list[PurePosixPath]:
        """Files below ``p`` (or ``[p]`` if it names a single file)."""

    @abstractmethod
    def get_file(self, p: PathLike) -> File:
        """Read the file at ``p``."""

    @abstractmethod
    def exists(self, p: PathLike) -> bool:
        """Whether a file exists at ``p``."""

    @abstractmethod
    def file_size(self, p: PathLike) -> int:
        """Size in bytes of the file at ``p``."""

    @abstractmethod
    def type(self) -> DirType:
        """The kind of storage behind this directory."""

    @abstractmethod
    def hash(self) -> int:
        """A 64-bit fingerprint of all contents."""


class FsDir(Dir):
    """A directory on the local file system."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(Path(path))

    def list_files(self, p: PathLike) -> list[PurePosixPath]:
        target = self.path / p
        if not target.is_dir():
            return [PurePosixPath(_as_text(p))]
        return sorted(
            PurePosixPath(entry.relative_to(self.path).as_posix())
            for entry in target.rglob("*")
        )

    def get_file(self, p: PathLike) -> File:
        full = self.path / p
        content = full.read_bytes()
        log(LogLevel.INFO, "loader.fs_dir", "loaded {}: {} bytes",
            full.as_posix(), len(content))
        return File(str(full), content)

    def exists(self, p: PathLike) -> bool:
        return (self.path / p).is_file()

    def file_size(self, p: PathLike) -> int:
        return (self.path / p).stat().st_size

    def type(self) -> DirType:
        return DirType.FILESYSTEM

    def hash(self) -> int:
        h = 0
        for entry in sorted(self.path.rglob("*")):
            if not entry.is_file():
                continue
            h = _hash64(entry.as_posix().encode("utf-8"), h)
            h = _hash64(entry.read_bytes(), h)
        return h


class ZipDir(Dir):
    """A ZIP archive, read from a file or from bytes in memory."""

    def __init__(self, source: PathLike | bytes | bytearray) -> None:
        if isinstance(source, (bytes, bytearray)):
            super().__init__(_MEMORY_PATH)
            self._memory = bytes(source)
            where = "inmemory"
        else:
            super().__init__(Path(source))
            self._memory = Path(source).read_bytes()
            where = str(source)
        try:
            self._zip = zipfile.ZipFile(io.BytesIO(self._memory))
        except zipfile.BadZipFile as e:
            raise ValueError(f"unable to open zip at {where}: {e}") from e
        self._infos = self._zip.infolist()

    def __enter__(self) -> ZipDir:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def _find(self, name: str) -> zipfile.ZipInfo | None:
        folded = name.casefold()
        for info in self._infos:
            if info.filename == name:
                return info
        for info in self._infos:
            if info.filename.casefold() == folded:
                return info
        return None

    def _get(self, name: str) -> zipfile.ZipInfo:
        info = self._find(name)
        if info is None:
            raise FileNotFoundError(f"cannot locate file {name} in zip")
        return info

    def list_files(self, p: PathLike) -> list[PurePosixPath]:
        parent = normalize(p)
        if not parent.endswith("/") and not PurePosixPath(parent).suffix:
            parent += "/"
        if parent in ("./", "/"):
            parent = ""
        elif not self._get(parent).is_dir():
            return [PurePosixPath(_as_text(p))]
        return sorted(
            PurePosixPath(info.filename)
            for info in self._infos
            if info.filename.startswith(parent) and info.filename != parent
        )

    def get_file(self, p: PathLike) -> File:
        info = self._get(normalize(p))
        return File(_as_text(p), self._zip.read(info))

    def exists(self, p: PathLike) -> bool:
        return self._find(normalize(p)) is not None

    def file_size(self, p: PathLike) -> int:
        name = normalize(p)
        info = self._find(name)
        if info is None:
            raise FileNotFoundError(f"zip_dir::file_size: not found: {name}")
        return info.file_size

    def type(self) -> DirType:
        return DirType.ZIP

    def hash(self) -> int:
        return _hash64(self._memory, 0)


class MemDir(Dir):
    """Files held in memory, keyed by normalized path."""

    def __init__(self, files: Mapping[PathLike, str | bytes] | None = None) -> None:
        super().__init__(_MEMORY_PATH)
        self._files: dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: PathLike, content: str | bytes) -> MemDir:
        """Add a file unless one already exists at ``path``; return ``self``."""
        self._files.setdefault(normalize(path), _to_bytes(content))
        return self

    def _get(self, p: PathLike) -> bytes:
        name = normalize(p)
        try:
            return self._files[name]
        except KeyError:
            raise FileNotFoundError(f"no file {name} in memory directory") from None

    def list_files(self, p: PathLike) -> list[PurePosixPath]:
        prefix = normalize(p)
        return [PurePosixPath(name) for name in sorted(self._files)
                if name.startswith(prefix)]

    def get_file(self, p: PathLike) -> File:
        return File(_as_text(p), self._get(p))

    def exists(self, p: PathLike) -> bool:
        return normalize(p) in self._files

    def file_size(self, p: PathLike) -> int:
        return len(self._get(p))

    def type(self) -> DirType:
        return DirType.IN_MEMORY

    def hash(self) -> int:
        h = 0
        for name in sorted(self._files):
            h = _hash64(name.encode("utf-8"), h)
            h = _hash64(self._files[name], h)
        return h

    @classmethod
    def read(cls, s: str) -> MemDir:
        """Parse text in which each line ``# name`` starts a new file."""
        files: dict[str, str] = {}
        file_name: str | None = None
        begin = 0
        pos = 0
        for line in s.split("\n"):
            if line.startswith("#"):
                if file_name is not None:
                    files.setdefault(file_name, s[begin:max(begin, pos - 1)])
                file_name = line[1:].strip()
                begin = pos + len(line) + 1
            pos += len(line) + 1
        if file_name is not None:
            files.setdefault(file_name, s[begin:])
        return cls(files)


def make_dir(p: PathLike) -> Dir:
    """Open ``p`` as a ZIP archive (``.zip`` file) or a file-system directory."""
    path = Path(p)
    if path.is_file() and path.suffix == ".zip":
        return ZipDir(path)
    if path.is_dir():
        return FsDir(path)
    raise ValueError(f"path {p} is neither a zip file nor a directory")