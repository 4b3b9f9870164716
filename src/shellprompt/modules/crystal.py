"""Crystal version module

Shown when the current directory contains a ``shard.yml`` file or any
``.cr`` file.
"""

import logging
from typing import Optional

from ..context import Context
from ..formatter import FormatterError, StringFormatter
from ..module import Module

logger = logging.getLogger(__name__)


def module(context: Context) -> Optional[Module]:
    is_crystal_project = (context.begin_scan()
                          .set_files(['shard.yml'])
                          .set_extensions(['cr'])
                          .is_match())
    if not is_crystal_project:
        return None

    config = context.config.crystal
    if config.disabled:
        return None
    crystal_module = context.new_module('crystal')

    def version(variable: str) -> Optional[str]:
        if variable != 'version':
            return None
        output = context.exec_cmd('crystal', ['--version'])
        return format_crystal_version(output.stdout) if output else None

    try:
        segments = (StringFormatter(config.format)
                    .map_meta(lambda variable, _: config.symbol if variable == 'symbol' else None)
                    .map_style(lambda variable: config.style if variable == 'style' else None)
                    .map(version)
                    .parse())
    except FormatterError as error:
        logger.warning("Error in module `crystal`:\n%s", error)
        return None

    crystal_module.set_segments(segments)
    return crystal_module


def format_crystal_version(crystal_version: str) -> Optional[str]:
    # "Crystal 0.35.1 (2020-06-19)" -> "0.35.1"
    parts = crystal_version.split()
    return parts[1] if len(parts) > 1 else None
