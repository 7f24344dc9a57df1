"""
Configuration Management System for the Cross-Sum Puzzle Toolkit.

This module loads parameters from cross_sum_config.txt with type-safe parsing
and default values for puzzle generation, game sessions and the CLI.

Key Features:
- Type-safe parameter parsing (string, int, float, bool)
- Hierarchical configuration: CLI args → Config file → Defaults
- Automatic project root detection
- Global config singleton via get_config() with reload support
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

__all__ = ["ConfigLoader", "get_config", "reload_config"]


class ConfigLoader:
    """
    Loads and manages configuration parameters for the toolkit.

    Provides type-safe access to configuration values with defaults.
    """

    def __init__(self, config_file: str = "cross_sum_config.txt"):
        """
        Initialize configuration loader.

        Args:
            config_file: Config file name, searched for from the package
                directory upwards, or an absolute path
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _find_config_path(self) -> Optional[Path]:
        candidate = Path(self.config_file)
        if candidate.is_absolute():
            return candidate if candidate.exists() else None

        current_path = Path(__file__).parent
        for _ in range(5):  # Limit search depth
            potential_path = current_path / self.config_file
            if potential_path.exists():
                return potential_path
            current_path = current_path.parent
        return None

    def _load_config(self):
        """Load configuration from file."""
        self._load_defaults()

        config_path = self._find_config_path()
        if config_path is None:
            logger.warning(f"Config file {self.config_file} not found, using defaults")
            return

        logger.info(f"Loading configuration from {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    # Skip comments and empty lines
                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        logger.warning(f"Invalid config line {line_num}: {line}")
                        continue

                    key, value = line.split("=", 1)
                    self.config[key.strip()] = self._parse_value(value.strip())

            logger.info(f"Loaded {len(self.config)} configuration parameters")

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load config: {e}")
            self._load_defaults()

    def _parse_value(self, value: str) -> Union[str, int, float, bool]:
        """Parse string value to appropriate Python type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        if value and value.replace(".", "", 1).lstrip("-").isdigit():
            if "." in value:
                return float(value)
            return int(value)

        return value

    def _load_defaults(self):
        """Load default configuration values."""
        self.config = {
            # Generation
            "DEFAULT_GRID_SIZE": 4,
            "DEFAULT_DIFFICULTY": "Easy",
            "MIN_GRID_SIZE": 3,
            "MAX_GRID_SIZE": 6,
            "DEFAULT_PUZZLE_COUNT": 1,
            "RANDOM_SEED": "",
            # Game session
            "POINTS_PER_CELL": 10,
            # CLI output
            "OUTPUT_DIR": "",
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration parameter name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value."""
        value = self.get(key, default)
        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for {key}: {value}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return default

    def get_string(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_optional_int(self, key: str) -> Optional[int]:
        """Get integer value, or None when the key is unset or blank."""
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return None

    def get_generation_config(self) -> Dict[str, Any]:
        """Get puzzle generation configuration parameters."""
        return {
            "default_grid_size": self.get_int("DEFAULT_GRID_SIZE", 4),
            "default_difficulty": self.get_string("DEFAULT_DIFFICULTY", "Easy"),
            "min_grid_size": self.get_int("MIN_GRID_SIZE", 3),
            "max_grid_size": self.get_int("MAX_GRID_SIZE", 6),
            "random_seed": self.get_optional_int("RANDOM_SEED"),
        }

    def get_session_config(self) -> Dict[str, Any]:
        """Get game session configuration parameters."""
        return {
            "points_per_cell": self.get_int("POINTS_PER_CELL", 10),
        }

    def get_cli_defaults(self) -> Dict[str, Any]:
        """Get CLI default values."""
        return {
            "grid_size": self.get_int("DEFAULT_GRID_SIZE", 4),
            "difficulty": self.get_string("DEFAULT_DIFFICULTY", "Easy"),
            "count": self.get_int("DEFAULT_PUZZLE_COUNT", 1),
            "seed": self.get_optional_int("RANDOM_SEED"),
            "output_dir": self.get_string("OUTPUT_DIR", "") or None,
        }


# Global configuration instance
_config = None


def get_config() -> ConfigLoader:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = ConfigLoader()
    return _config


def reload_config():
    """Reload configuration from file."""
    global _config
    _config = ConfigLoader()
    return _config
