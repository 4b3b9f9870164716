"""Per-render state shared by all modules"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from . import utils
from .config import PromptConfig
from .module import Module
from .scan import DirectoryCache, ScanSession, begin_scan

logger = logging.getLogger(__name__)


class Shell(Enum):
    """Shells the prompt can be rendered for"""
    BASH = 'bash'
    FISH = 'fish'
    ZSH = 'zsh'
    POWERSHELL = 'powershell'
    ION = 'ion'
    ELVISH = 'elvish'
    TCSH = 'tcsh'
    UNKNOWN = 'unknown'

    @classmethod
    def detect(cls, name: Optional[str]) -> 'Shell':
        """Map a shell name such as ``zsh`` or ``/bin/bash`` to a Shell"""
        if not name:
            return cls.UNKNOWN
        # login shells report themselves as -bash, -zsh
        name = os.path.basename(name.strip()).lstrip('-').lower()
        if name in ('pwsh', 'pwsh.exe', 'powershell.exe'):
            return cls.POWERSHELL
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


def current_dir() -> Path:
    """Working directory, falling back to $PWD when it no longer exists"""
    try:
        return Path(os.getcwd())
    except FileNotFoundError:
        return Path(os.getenv("PWD", "/"))


class Context:
    """Everything a module needs to decide whether and what to render"""

    def __init__(self,
                 path: Optional[str] = None,
                 shell: Shell = Shell.UNKNOWN,
                 config: Optional[PromptConfig] = None,
                 dir_cache: Optional[DirectoryCache] = None):
        """Initialize context; the directory cache lives as long as this context"""
        self.current_dir = Path(path) if path else current_dir()
        self.shell = shell
        self.config = config if config is not None else PromptConfig()
        self.dir_cache = dir_cache if dir_cache is not None else DirectoryCache()

    def begin_scan(self) -> ScanSession:
        """Start a scan of the current directory"""
        return begin_scan(self.current_dir, self.dir_cache)

    def new_module(self, name: str) -> Module:
        return Module(name)

    def exec_cmd(self, cmd: str, args: Sequence[str]) -> Optional[utils.CommandOutput]:
        """Run a command with the configured timeout"""
        return utils.exec_cmd(cmd, args, timeout=self.config.command_timeout)
