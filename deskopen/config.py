"""
Configuration for deskopen

All settings come from the environment; the library never writes a
configuration file of its own.
"""

import os
from pathlib import Path
from typing import Optional


class Config:
    """Environment-driven configuration"""

    LOG_FILE_NAME = "deskopen.log"

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = self._get_config_dir()
        self.config_dir = config_dir

    @staticmethod
    def _get_config_dir() -> Path:
        """Get deskopen configuration directory"""
        # DESKOPEN_HOME overrides everything
        home = os.environ.get("DESKOPEN_HOME")
        if home:
            return Path(home)

        if "XDG_CONFIG_HOME" in os.environ:
            config_home = Path(os.environ["XDG_CONFIG_HOME"])
        else:
            config_home = Path.home() / ".config"
        return config_home / "deskopen"

    @property
    def log_file(self) -> Path:
        """Path of the log file used when verbose logging is enabled"""
        return self.config_dir / self.LOG_FILE_NAME

    def ensure_config_dir(self) -> Path:
        """Create the configuration directory if needed"""
        self.config_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
        return self.config_dir

    @staticmethod
    def get_log_level() -> str:
        """Get log level name"""
        return os.environ.get("DESKOPEN_LOG_LEVEL", "ERROR").upper()

    @staticmethod
    def get_color_override() -> Optional[str]:
        """Get color mode from DESKOPEN_COLOR, if set"""
        value = os.environ.get("DESKOPEN_COLOR")
        return value.lower() if value else None
