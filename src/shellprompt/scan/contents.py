"""Directory listings and the per-render listing cache"""

import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class DirContents:
    """Immediate entries of one directory"""
    files: FrozenSet[str] = frozenset()
    folders: FrozenSet[str] = frozenset()
    extensions: FrozenSet[str] = frozenset()

    @classmethod
    def from_path(cls, directory: PathLike) -> 'DirContents':
        """
        Read a directory once

        Unreadable directories give an empty listing. Entries whose type
        cannot be determined (broken links, link loops) are skipped.
        """
        files = set()
        folders = set()
        extensions = set()

        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir():
                            folders.add(entry.name)
                        elif entry.is_file():
                            files.add(entry.name)
                            extension = os.path.splitext(entry.name)[1]
                            if extension:
                                extensions.add(extension[1:])
                    except OSError as e:
                        logger.debug("Skipping %s: %s", entry.path, e)
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            return cls()

        return cls(frozenset(files), frozenset(folders), frozenset(extensions))


Lister = Callable[[Path], DirContents]


def canonical_path(directory: PathLike) -> Path:
    """Absolute, symlink-resolved form of a directory path"""
    try:
        return Path(directory).resolve()
    except (OSError, RuntimeError):
        return Path(os.path.abspath(directory))


class _Slot:
    """Listing computed by exactly one thread and awaited by the others"""

    def __init__(self):
        self.ready = threading.Event()
        self.contents: Optional[DirContents] = None
        self.error: Optional[BaseException] = None


class DirectoryCache:
    """
    Listings shared by every scan in one prompt render

    Each directory is listed at most once, even when several threads ask
    for it at the same time: the first caller lists it, the others wait
    for that result.
    """

    def __init__(self, lister: Lister = DirContents.from_path):
        """Initialize the cache with the function used to read a directory"""
        self._lister = lister
        self._lock = threading.Lock()
        self._slots: Dict[Path, _Slot] = {}

    def get(self, directory: PathLike) -> DirContents:
        """Return the listing of a directory, reading it on first use"""
        key = canonical_path(directory)

        with self._lock:
            slot = self._slots.get(key)
            owner = slot is None
            if owner:
                slot = _Slot()
                self._slots[key] = slot

        if owner:
            try:
                slot.contents = self._lister(key)
            except BaseException as e:
                slot.error = e
                raise
            finally:
                slot.ready.set()
        else:
            slot.ready.wait()

        if slot.error is not None:
            raise slot.error
        return slot.contents

    def clear(self):
        """Forget all listings"""
        with self._lock:
            self._slots.clear()

    def __contains__(self, directory: PathLike) -> bool:
        with self._lock:
            return canonical_path(directory) in self._slots

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)
