"""Prompt modules, one per tool or shell feature"""

from typing import Callable, Dict, Optional

from ..context import Context
from ..module import Module
from . import crystal, lua, shell

ModuleHandler = Callable[[Context], Optional[Module]]

ALL_MODULES: Dict[str, ModuleHandler] = {
    'crystal': crystal.module,
    'lua': lua.module,
    'shell': shell.module,
}

__all__ = ['ALL_MODULES', 'ModuleHandler']
