"""Loading of asset files from disk or from a zip archive."""

from __future__ import annotations

import enum
import zipfile
from dataclasses import dataclass
from typing import Any

from seika import file_system


class ReadMode(enum.Enum):
    """Where assets are read from."""

    DISK = enum.auto()
    ARCHIVE = enum.auto()


@dataclass(frozen=True)
class ArchiveFileAsset:
    """Raw bytes of an asset, or None when it could not be loaded."""

    buffer: bytes | None = None

    @property
    def buffer_size(self) -> int:
        return 0 if self.buffer is None else len(self.buffer)

    def is_valid(self) -> bool:
        return self.buffer is not None


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class AssetFileLoader:
    """Reads assets from disk or, in archive mode, from a loaded zip package."""

    def __init__(self) -> None:
        self.read_mode = ReadMode.DISK
        self._archive: zipfile.ZipFile | None = None

    def close(self) -> None:
        """Close the loaded archive, if any."""
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def __enter__(self) -> AssetFileLoader:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def load_archive(self, path: file_system.PathLike) -> bool:
        """Open the zip archive at ``path``; return False if the file is missing."""
        if not file_system.does_file_exist(path):
            return False
        self.close()
        self._archive = zipfile.ZipFile(path, "r")
        return True

    def get_asset(self, path: str) -> ArchiveFileAsset:
        """Return the archive entry at ``path``; invalid if absent."""
        if self._archive is None:
            return ArchiveFileAsset()
        try:
            return ArchiveFileAsset(self._archive.read(path))
        except KeyError:
            return ArchiveFileAsset()

    @staticmethod
    def load_asset_from_disk(path: file_system.PathLike) -> ArchiveFileAsset:
        """Return the file at ``path`` as an asset; invalid if it does not exist."""
        if not file_system.does_file_exist(path):
            return ArchiveFileAsset()
        return ArchiveFileAsset(file_system.read_file_contents(path))

    def read_file_contents_as_string(self, path: str) -> str | None:
        """Return the asset at ``path`` as text, or None when it cannot be read."""
        if self.read_mode is ReadMode.DISK:
            if file_system.does_file_exist(path):
                return _decode(file_system.read_file_contents(path))
            return None
        asset = self.get_asset(path)
        return _decode(asset.buffer) if asset.is_valid() else None

    def read_file_contents_as_string_without_raw(self, path: str) -> str | None:
        """Like :meth:`read_file_contents_as_string` but without carriage returns."""
        if self.read_mode is ReadMode.DISK:
            if file_system.does_file_exist(path):
                return file_system.read_file_contents_without_raw(path)
            return None
        asset = self.get_asset(path)
        if not asset.is_valid():
            return None
        return _decode(asset.buffer).replace("\r", "")