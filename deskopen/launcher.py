"""
Helper program discovery and invocation
"""

import os
import subprocess
from typing import Callable, Iterable, List, Optional

from .logger import get_logger


def find_first_existing(candidates: Iterable[str],
                        exists: Optional[Callable[[str], bool]] = None) -> Optional[str]:
    """
    Return the first candidate path that exists

    Args:
        candidates: Absolute paths, in order of preference
        exists: Existence check, os.path.isfile by default

    Returns:
        Path of the first existing candidate, or None
    """
    if exists is None:
        exists = os.path.isfile
    for candidate in candidates:
        if exists(candidate):
            return candidate
    return None


def run_helper(command: List[str]) -> bool:
    """
    Run a helper program and wait for it to exit

    The target is always a single argv element; no shell is involved.

    Args:
        command: Program and arguments

    Returns:
        True if the program exited with status 0, False otherwise
    """
    logger = get_logger()
    logger.debug("Running %s", " ".join(command))

    try:
        result = subprocess.run(command)
    except (OSError, ValueError) as e:
        # ValueError: argv containing a NUL byte
        logger.error("Failed to run %s: %s", command[0], e)
        return False

    if result.returncode != 0:
        logger.verbose("%s exited with status %d", command[0], result.returncode)
        return False
    return True
