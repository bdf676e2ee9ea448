"""Synchronous execution of external commands."""

import logging
import shutil
import subprocess

from svcmgr.exceptions import CommandFailedError, CommandNotFoundError

logger = logging.getLogger(__name__)


def command_exists(program: str) -> bool:
    """Check whether a program can be found on PATH.

    Args:
        program: Executable name or path.

    Returns:
        True if the program resolves to an executable.
    """
    return shutil.which(program) is not None


def run_command(args: list[str]) -> str:
    """Run a command and return its standard output.

    Args:
        args: Program followed by its arguments.

    Returns:
        Captured stdout as text.

    Raises:
        CommandNotFoundError: If the program cannot be located.
        CommandFailedError: If the program exits with a non-zero status.
    """
    logger.debug("Running %s", " ".join(args))
    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError:
        raise CommandNotFoundError(args[0]) from None

    if result.returncode != 0:
        logger.debug("%s exited with %d", args[0], result.returncode)
        raise CommandFailedError(args, result.returncode, result.stderr)

    return result.stdout
