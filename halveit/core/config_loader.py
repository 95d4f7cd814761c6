"""
Rule configuration with defaults.
"""
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import logging

import yaml

from .io_utils import load_yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration container for rule parameters.

    Only tunable house-rule values live here; the board layout and the
    contract order are fixed tables in their own modules.
    """

    DEFAULTS = {
        # Killer: lives cap (also the killer threshold) and elimination line
        "killer": {
            "max_lives": 9,
            "elimination_threshold": -1,
        },

        # Clock: turn limit per player before the furthest player wins
        "clock": {
            "max_turns": 10,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(config_path)
                self._merge_config(user_config)
                self._validate_rules()
                logger.info(f"Configuration loaded from {config_path}")
            except (yaml.YAMLError, ValueError, OSError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section, {})

    def _validate_rules(self) -> None:
        """Reset rule values the game modes cannot play with to their defaults."""
        for section, defaults in self.DEFAULTS.items():
            values = self.data.get(section)
            if not isinstance(values, dict):
                logger.warning(f"Invalid config section '{section}': {values!r}, using defaults")
                self.data[section] = copy.deepcopy(defaults)
                continue
            for key, default in defaults.items():
                value = values.get(key)
                if not isinstance(value, int) or isinstance(value, bool):
                    logger.warning(f"Invalid {section}.{key}: {value!r}, using default {default}")
                    values[key] = default

        killer = self.data["killer"]
        if killer["max_lives"] <= killer["elimination_threshold"]:
            logger.warning(
                f"killer.max_lives ({killer['max_lives']}) must be above "
                f"elimination_threshold ({killer['elimination_threshold']}), using defaults"
            )
            killer.update(self.DEFAULTS["killer"])

        clock = self.data["clock"]
        if clock["max_turns"] < 1:
            logger.warning(f"clock.max_turns must be at least 1, got {clock['max_turns']}, using default")
            clock["max_turns"] = self.DEFAULTS["clock"]["max_turns"]
