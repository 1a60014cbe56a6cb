"""
Terminal output for the deskopen CLI
"""

import os
import shlex
import sys
from enum import Enum
from typing import List, Optional

from .models import DetectionResult


class ColorMode(Enum):
    """Color output modes"""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class TerminalColors:
    """ANSI color codes"""
    FG_RED = "\033[31m"
    FG_GREEN = "\033[32m"
    FG_YELLOW = "\033[33m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class Terminal:
    """Colored status output"""

    _color_mode: ColorMode = ColorMode.AUTO
    _color_enabled: Optional[bool] = None

    @classmethod
    def set_color_mode(cls, mode: ColorMode) -> None:
        cls._color_mode = mode
        cls._color_enabled = None

    @classmethod
    def resolve_color_mode(cls, flag: Optional[str], environment: Optional[str] = None) -> ColorMode:
        """
        Pick the color mode from the --color flag, then DESKOPEN_COLOR

        Unknown values fall back to AUTO.
        """
        for value in (flag, environment):
            if value:
                try:
                    return ColorMode(value.lower())
                except ValueError:
                    return ColorMode.AUTO
        return ColorMode.AUTO

    @classmethod
    def is_color_enabled(cls) -> bool:
        """AUTO colors only a TTY with a capable TERM and no NO_COLOR"""
        if cls._color_enabled is None:
            if cls._color_mode is ColorMode.AUTO:
                term = os.environ.get('TERM', '')
                cls._color_enabled = (sys.stdout.isatty()
                                      and not os.environ.get('NO_COLOR')
                                      and term not in ('', 'dumb'))
            else:
                cls._color_enabled = cls._color_mode is ColorMode.ALWAYS
        return cls._color_enabled

    @classmethod
    def colorize(cls, text: str, *codes: str) -> str:
        if not codes or not cls.is_color_enabled():
            return text
        return f"{''.join(codes)}{text}{TerminalColors.RESET}"

    @classmethod
    def success(cls, text: str) -> str:
        return cls.colorize(text, TerminalColors.FG_GREEN, TerminalColors.BOLD)

    @classmethod
    def error(cls, text: str) -> str:
        return cls.colorize(text, TerminalColors.FG_RED, TerminalColors.BOLD)

    @classmethod
    def warning(cls, text: str) -> str:
        return cls.colorize(text, TerminalColors.FG_YELLOW, TerminalColors.BOLD)

    @classmethod
    def field(cls, label: str, value: str) -> str:
        """Format a ``Label: value`` line with a bold label"""
        return f"{cls.colorize(label + ':', TerminalColors.BOLD)} {value}"

    @classmethod
    def desktop_status(cls, result: DetectionResult) -> str:
        """
        Describe a detection result

        Query errors are yellow, an available desktop green and a missing
        one plain.
        """
        if result.is_error:
            return cls.warning(f"query failed with status {result.error_code}")
        if result.available:
            return cls.success("available")
        return "not available"

    @staticmethod
    def command_line(command: List[str]) -> str:
        """Render argv so it can be pasted into a POSIX shell"""
        return ' '.join(shlex.quote(part) for part in command)

    @classmethod
    def handler(cls, command: Optional[List[str]]) -> str:
        """Describe a resolved helper command, or its absence"""
        if command is None:
            return cls.warning("none found")
        return cls.command_line(command)
