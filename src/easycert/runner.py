from __future__ import annotations
import logging
import subprocess
import traceback

from .errors import CommandError

logger = logging.getLogger(__name__)

FAILURE_MARKER = "call_command failed!"


def _log_failure(detail: str) -> None:
    logger.error(FAILURE_MARKER)
    logger.error(detail)
    logger.error("".join(traceback.format_stack()))


def call_command(program: str, *args: str) -> str:
    """Run program with args, wait for it, and return its stdout.

    A missing binary and a non-zero exit both end up as CommandError.
    """
    argv = [program, *args]
    logger.debug("running: %s", " ".join(argv))
    try:
        result = subprocess.run(argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except OSError as e:
        _log_failure(str(e))
        raise CommandError(argv) from e

    if result.returncode != 0:
        _log_failure(result.stderr.strip())
        raise CommandError(argv, result.returncode, result.stderr)
    return result.stdout
