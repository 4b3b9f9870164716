"""Assemble the full prompt from the configured modules"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .context import Context
from .formatter import Segment
from .module import Module
from .modules import ALL_MODULES

logger = logging.getLogger(__name__)

MAX_WORKERS = 8


def handle_module(name: str, context: Context) -> Optional[Module]:
    """Render one module; any failure means it contributes nothing"""
    handler = ALL_MODULES.get(name)
    if handler is None:
        logger.warning("Unknown module `%s`", name)
        return None

    start = time.perf_counter()
    try:
        module = handler(context)
    except Exception:
        logger.exception("Module `%s` crashed", name)
        return None

    if module is not None:
        module.duration = time.perf_counter() - start
    return module


def render_modules(context: Context, names: Optional[Sequence[str]] = None) -> List[Module]:
    """
    Render modules concurrently, keeping the configured order

    All modules share the context's directory cache, so the current
    directory is listed once no matter how many modules scan it.
    Modules that are inactive or only produce whitespace are dropped.
    """
    names = list(names if names is not None else context.config.modules)
    if not names:
        return []

    with ThreadPoolExecutor(max_workers=min(len(names), MAX_WORKERS)) as executor:
        futures = [executor.submit(handle_module, name, context) for name in names]
        modules = [future.result() for future in futures]

    return [module for module in modules if module is not None and not module.is_empty()]


def render_prompt(context: Context, names: Optional[Sequence[str]] = None) -> List[Segment]:
    """Segments of the whole prompt, module after module"""
    segments: List[Segment] = []
    for module in render_modules(context, names):
        segments.extend(module.segments)
    return segments
