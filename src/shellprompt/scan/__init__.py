"""Directory scanning for module activation"""

from .contents import DirContents, DirectoryCache, canonical_path
from .session import ScanCriteria, ScanSession, begin_scan

__all__ = ['DirContents', 'DirectoryCache', 'canonical_path', 'ScanCriteria', 'ScanSession', 'begin_scan']
