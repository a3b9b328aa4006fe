from __future__ import annotations

import logging
import os
import tomllib

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_FILENAME = "wellness.toml"
CONFIG_ENV_VAR = "WELLNESS_CONFIG"
DATA_FILE_ENV_VAR = "WELLNESS_DATA_FILE"

logger = logging.getLogger(__name__)

@dataclass
class Config:
    """Configuration for the wellness journal. This object includes the default values for the CLI."""
    data_file: Path = Path("wellness_data.txt")
    exercise_type: str = "Exercise"

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        defaults = cls()
        data_file = Path(data["data_file"]) if "data_file" in data else defaults.data_file
        exercise_type = data.get("exercise_type", defaults.exercise_type)
        return cls(data_file, exercise_type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data_file": str(self.data_file),
            "exercise_type": self.exercise_type,
        }

    @classmethod
    def config_path(cls, working_dir: Optional[Path] = None) -> Path:
        """
        Where the TOML configuration lives: $WELLNESS_CONFIG if set,
        otherwise wellness.toml in the working directory.
        """
        if os.getenv(CONFIG_ENV_VAR):
            return Path(os.environ[CONFIG_ENV_VAR])
        return (working_dir or Path.cwd()) / CONFIG_FILENAME

    @classmethod
    def load(cls, working_dir: Optional[Path] = None) -> Config:
        """
        Build the configuration from defaults, the TOML file (if present) and
        the environment, in that order of precedence.
        """
        path = cls.config_path(working_dir)
        config = cls()
        if path.exists():
            try:
                with path.open("rb") as f:
                    config = cls.from_dict(tomllib.load(f))
            except (tomllib.TOMLDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable configuration file %s: %s", path, e)

        if os.getenv(DATA_FILE_ENV_VAR):
            config.data_file = Path(os.environ[DATA_FILE_ENV_VAR])

        return config
