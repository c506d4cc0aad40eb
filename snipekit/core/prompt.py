"""
Terminal prompting.

Path: snipekit/core/prompt.py
"""

import getpass
import logging
import sys
from typing import Optional


logger = logging.getLogger(__name__)


def prompt(text: str, noecho: bool = False) -> Optional[str]:
    """
    Prompt on the terminal and return the response line.

    Args:
        text: Prompt text.
        noecho: Disable echo (for passwords).

    Returns:
        The entered line without its newline, or None if stdin is not
        a terminal or input ended.
    """
    if not sys.stdin.isatty():
        logger.error("Cannot prompt, stdin is not a terminal")
        return None

    try:
        if noecho:
            return getpass.getpass(text)
        return input(text)
    except EOFError:
        return None
