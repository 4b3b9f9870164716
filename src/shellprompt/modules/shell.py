"""Shell indicator module, disabled unless configured"""

import logging
from typing import Optional

from ..config import ShellConfig
from ..context import Context, Shell
from ..formatter import FormatterError, StringFormatter
from ..module import Module

logger = logging.getLogger(__name__)

INDICATOR_FIELDS = {
    Shell.BASH: 'bash_indicator',
    Shell.FISH: 'fish_indicator',
    Shell.ZSH: 'zsh_indicator',
    Shell.POWERSHELL: 'powershell_indicator',
    Shell.ION: 'ion_indicator',
    Shell.ELVISH: 'elvish_indicator',
    Shell.TCSH: 'tcsh_indicator',
    Shell.UNKNOWN: 'unknown_indicator',
}


def indicator_for(shell: Shell, config: ShellConfig) -> str:
    return getattr(config, INDICATOR_FIELDS[shell])


def module(context: Context) -> Optional[Module]:
    config = context.config.shell
    if config.disabled:
        return None

    shell_module = context.new_module('shell')
    indicators = {field: getattr(config, field) for field in INDICATOR_FIELDS.values()}

    try:
        segments = (StringFormatter(config.format)
                    .map_meta(lambda variable, _: (indicator_for(context.shell, config)
                                                   if variable == 'indicator' else None))
                    .map(indicators.get)
                    .parse())
    except FormatterError as error:
        logger.warning("Error in module `shell`:\n%s", error)
        return None

    shell_module.set_segments(segments)
    return shell_module
