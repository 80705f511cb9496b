"""Run the system ARP command and capture its output."""

import logging
import subprocess
from typing import Sequence

from .defaults import DEFAULT_ARP_COMMAND, DEFAULT_COMMAND_TIMEOUT
from .util import CommandError

log = logging.getLogger(__name__)


def run_arp_command(command: Sequence[str] = DEFAULT_ARP_COMMAND,
                    timeout: int = DEFAULT_COMMAND_TIMEOUT) -> str:
    """Execute command and return its stdout as text.

    Raises CommandError if the command is missing, times out, or exits non-zero.
    """
    cmd_str = " ".join(command)
    log.info(f"Running: {cmd_str}")
    try:
        result = subprocess.run(list(command), capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as e:
        raise CommandError(f'Command "{cmd_str}" failed: executable not found', cmd_str) from e
    except subprocess.TimeoutExpired as e:
        raise CommandError(f'Command "{cmd_str}" failed: timed out after {timeout}s', cmd_str) from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        if stderr:
            log.debug(f"{cmd_str} stderr: {stderr}")
        raise CommandError(
            f'Command "{cmd_str}" failed: non-zero return code {result.returncode}',
            cmd_str, result.returncode,
        )
    return result.stdout
