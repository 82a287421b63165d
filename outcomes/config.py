"""
Outcome catalog management.

Loads and validates an outcomes.yaml catalog that names reusable outcome
sets, so producers across a codebase declare the same names:

    catalog:
      name: tweets
    outcomes:
      tweet: [success, failure]
      fetch: [ok, not_found, timeout]
      confirm: ["yes", "no"]
    logging:
      level: INFO
      format: pretty

Outcome names must be strings. Quote names YAML would otherwise read as
booleans or numbers.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from outcomes.errors import ConfigError, EmptyOutcomeSet
from outcomes.names import OutcomeNameSet

DEFAULT_CATALOG_FILE = "outcomes.yaml"
CATALOG_ENV_VAR = "OUTCOMES_CATALOG"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class OutcomeCatalog:
    """Named outcome sets loaded from a YAML file."""

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path)
        self.raw_config = self._load_yaml()

        catalog = self.raw_config.get("catalog") or {}
        if not isinstance(catalog, dict):
            raise ConfigError("'catalog' must be a mapping")
        self.name = catalog.get("name", self.config_path.stem)
        self.version = str(catalog.get("version", "0.0.0"))
        self.description = catalog.get("description", "")

        self.sets: Dict[str, OutcomeNameSet] = self._load_sets(self.raw_config.get("outcomes"))

        self.logging = self.raw_config.get("logging") or {}

    def _load_yaml(self) -> Dict[str, Any]:
        """Load and parse YAML catalog file."""
        if not self.config_path.exists():
            raise ConfigError(f"Catalog file not found: {self.config_path}")

        try:
            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {e}")

        if not config:
            raise ConfigError("Catalog file is empty")
        if not isinstance(config, dict):
            raise ConfigError("Catalog file must contain a mapping")
        return config

    def _load_sets(self, data: Any) -> Dict[str, OutcomeNameSet]:
        if not data:
            raise ConfigError("Catalog has no 'outcomes' section")
        if not isinstance(data, dict):
            raise ConfigError("'outcomes' must map set names to lists of outcome names")

        sets: Dict[str, OutcomeNameSet] = {}
        for set_name, names in data.items():
            if not isinstance(names, list):
                raise ConfigError(f"Outcome set '{set_name}': expected a list of names")
            # YAML 1.1 reads yes/no/on/off as bools and 404 as an int
            for name in names:
                if not isinstance(name, str):
                    raise ConfigError(
                        f"Outcome set '{set_name}': name {name!r} is not a string; quote it in the catalog"
                    )
            try:
                sets[str(set_name)] = OutcomeNameSet(*names)
            except EmptyOutcomeSet:
                raise ConfigError(f"Outcome set '{set_name}' is empty")
        return sets

    def get(self, name: str) -> OutcomeNameSet:
        """Get an outcome set by name."""
        try:
            return self.sets[name]
        except KeyError:
            raise ConfigError(f"Unknown outcome set: {name}")

    def set_names(self) -> List[str]:
        return list(self.sets)

    def get_log_level(self) -> str:
        """Get logging level."""
        level = str(self.logging.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {level} (expected one of {', '.join(LOG_LEVELS)})")
        return level

    def get_log_format(self) -> str:
        """Get log format (structured or pretty)."""
        return self.logging.get("format", "pretty")

    def get_log_file_path(self) -> Optional[Path]:
        output = self.logging.get("output")
        return Path(output) if output else None

    def __repr__(self) -> str:
        return f"OutcomeCatalog(name={self.name}, version={self.version}, sets={len(self.sets)})"


def load_catalog(config_path: Optional[Path] = None) -> OutcomeCatalog:
    """
    Load an outcome catalog from YAML.

    Args:
        config_path: Path to catalog file. Defaults to $OUTCOMES_CATALOG,
            then outcomes.yaml in the current directory.

    Returns:
        OutcomeCatalog instance

    Raises:
        ConfigError: If catalog is invalid or missing
    """
    if config_path is None:
        config_path = Path(os.environ.get(CATALOG_ENV_VAR, DEFAULT_CATALOG_FILE))

    return OutcomeCatalog(config_path)
