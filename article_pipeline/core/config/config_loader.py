"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict
import yaml

from .app_config import AppConfig

COLLISION_POLICIES = ("overwrite", "error")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate types and value ranges of each section
    - Resolve relative paths against the config file's directory
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = Path(config_path)

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()

        storage_root = self._validate_storage_config(config_data)
        templates = self._validate_templates_config(config_data)
        output = self._validate_output_config(config_data)
        log_level = self._validate_logging_config(config_data)

        return AppConfig(
            storage_root=storage_root,
            template_dir=templates["dir"],
            template_name=templates["name"],
            on_collision=output["on_collision"],
            write_report=output["write_report"],
            log_level=log_level
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            if data is None:
                # An empty file means "all defaults"
                return {}

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _resolve(self, raw: str) -> Path:
        path = Path(raw.strip())
        if not path.is_absolute():
            path = (self._config_path.parent / path).resolve()
        return path

    def _section(self, config: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"Section '{name}' must be a mapping, got {type(section).__name__}"
            )
        return section

    def _validate_storage_config(self, config: Dict[str, Any]) -> Path:
        """Validate storage section."""
        storage = self._section(config, "storage")
        root = storage.get("root", "./storage")

        if not isinstance(root, str):
            raise ConfigValidationError(f"storage.root must be string, got {type(root).__name__}")
        if not root.strip():
            raise ConfigValidationError("storage.root cannot be empty")

        return self._resolve(root)

    def _validate_templates_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate templates section."""
        templates = self._section(config, "templates")
        directory = templates.get("dir", "./templates")
        name = templates.get("name", "article.md")

        if not isinstance(directory, str) or not directory.strip():
            raise ConfigValidationError("templates.dir must be a non-empty string")
        if not isinstance(name, str) or not name.strip():
            raise ConfigValidationError("templates.name must be a non-empty string")

        return {
            "dir": self._resolve(directory),
            "name": name.strip()
        }

    def _validate_output_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate output section."""
        output = self._section(config, "output")
        on_collision = output.get("on_collision", "overwrite")
        write_report = output.get("write_report", True)

        if not isinstance(on_collision, str) or on_collision.strip() not in COLLISION_POLICIES:
            raise ConfigValidationError(
                f"output.on_collision must be one of {', '.join(COLLISION_POLICIES)}, got {on_collision!r}"
            )
        if not isinstance(write_report, bool):
            raise ConfigValidationError(
                f"output.write_report must be boolean, got {type(write_report).__name__}"
            )

        return {
            "on_collision": on_collision.strip(),
            "write_report": write_report
        }

    def _validate_logging_config(self, config: Dict[str, Any]) -> str:
        """Validate logging section."""
        logging_section = self._section(config, "logging")
        level = logging_section.get("level", "INFO")

        if not isinstance(level, str) or level.strip().upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )

        return level.strip().upper()
