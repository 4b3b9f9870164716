"""Helpers for running external commands"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured output of a finished command"""
    stdout: str
    stderr: str


def exec_cmd(cmd: str, args: Sequence[str], timeout: float = 0.5) -> Optional[CommandOutput]:
    """
    Run a command and capture its output

    Returns None if the executable cannot be found, fails to start,
    exits with a non-zero status or runs past ``timeout`` seconds.
    """
    executable = shutil.which(cmd)
    if executable is None:
        logger.debug("Executable `%s` not found", cmd)
        return None

    try:
        result = subprocess.run(
            [executable, *args],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Executing `%s` timed out after %.2fs", cmd, timeout)
        return None
    except OSError as e:
        logger.debug("Executing `%s` failed: %s", cmd, e)
        return None

    if result.returncode != 0:
        logger.debug("`%s` exited with status %d", cmd, result.returncode)
        return None

    return CommandOutput(stdout=result.stdout, stderr=result.stderr)
