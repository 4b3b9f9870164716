"""Project detection by file, folder and extension criteria"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .contents import DirContents, DirectoryCache, PathLike


@dataclass(frozen=True)
class ScanCriteria:
    """Names that mark a directory as a project of some kind"""
    files: FrozenSet[str] = frozenset()
    folders: FrozenSet[str] = frozenset()
    extensions: FrozenSet[str] = frozenset()

    def is_empty(self) -> bool:
        return not (self.files or self.folders or self.extensions)

    def matches(self, contents: DirContents) -> bool:
        """True if any file, folder or extension is present"""
        return bool(
            self.files & contents.files
            or self.folders & contents.folders
            or self.extensions & contents.extensions
        )


class ScanSession:
    """Builder for a single directory query"""

    def __init__(self, directory: PathLike, cache: DirectoryCache):
        self.directory = directory
        self.cache = cache
        self._files: FrozenSet[str] = frozenset()
        self._folders: FrozenSet[str] = frozenset()
        self._extensions: FrozenSet[str] = frozenset()

    def set_files(self, names: Iterable[str]) -> 'ScanSession':
        self._files = self._files | frozenset(names)
        return self

    def set_folders(self, names: Iterable[str]) -> 'ScanSession':
        self._folders = self._folders | frozenset(names)
        return self

    def set_extensions(self, extensions: Iterable[str]) -> 'ScanSession':
        self._extensions = self._extensions | frozenset(ext.lstrip('.') for ext in extensions)
        return self

    @property
    def criteria(self) -> ScanCriteria:
        return ScanCriteria(self._files, self._folders, self._extensions)

    def is_match(self) -> bool:
        """Check the accumulated criteria against the cached listing"""
        criteria = self.criteria
        if criteria.is_empty():
            return False
        return criteria.matches(self.cache.get(self.directory))


def begin_scan(directory: PathLike, cache: Optional[DirectoryCache] = None) -> ScanSession:
    """Start a scan of ``directory``, sharing ``cache`` if one is given"""
    return ScanSession(directory, cache if cache is not None else DirectoryCache())
