"""
Configuration persistence for genkit-migrate.

Loads and saves the tool configuration (default providers, interactivity,
per-provider settings) in YAML or TOML format.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
import yaml
from pydantic import ValidationError as PydanticValidationError

from genkit_migrate.core.exceptions import ConfigurationError
from genkit_migrate.models.config import ToolConfig
from genkit_migrate.utils.logging import get_logger


DEFAULT_CONFIG_NAME = ".genkit-migrate.yaml"

SUPPORTED_SUFFIXES = {".yaml": "yaml", ".yml": "yaml", ".toml": "toml"}


def default_config_path() -> Path:
    """Return ``~/.genkit-migrate.yaml``, or a path in the working directory without a home."""
    try:
        return Path.home() / DEFAULT_CONFIG_NAME
    except RuntimeError:
        return Path(DEFAULT_CONFIG_NAME)


class ConfigurationPersistence:
    """Handles saving and loading the tool configuration."""
    
    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize configuration persistence.
        
        Args:
            config_path: Configuration file. Defaults to ~/.genkit-migrate.yaml
        """
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.logger = get_logger("cli.config")
    
    @property
    def format(self) -> str:
        suffix = self.config_path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ConfigurationError(
                f"Unsupported configuration format: {self.config_path.name}. Use .yaml or .toml"
            )
        return SUPPORTED_SUFFIXES[suffix]
    
    def load(self) -> ToolConfig:
        """
        Load the configuration file.
        
        Returns:
            ToolConfig instance; defaults when the file does not exist
        
        Raises:
            ConfigurationError: If the file is unreadable, malformed or invalid
        """
        if not self.config_path.exists():
            self.logger.debug(f"No configuration file at {self.config_path}, using defaults")
            return ToolConfig()
        
        file_format = self.format
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                if file_format == "yaml":
                    data = yaml.safe_load(f)
                else:
                    data = toml.load(f)
        except (OSError, yaml.YAMLError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {self.config_path}: {e}"
            ) from e
        
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {self.config_path} must contain a mapping"
            )
        
        try:
            config = ToolConfig(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_path}: {e}",
                details={"errors": e.errors()}
            ) from e
        
        self.logger.debug(f"Using config file: {self.config_path}")
        return config
    
    def save(self, config: ToolConfig) -> Path:
        """
        Save the configuration, creating parent directories as needed.
        
        Returns:
            Path to the saved configuration file
        """
        file_format = self.format
        data = self._config_to_dict(config)
        
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                if file_format == "yaml":
                    yaml.safe_dump(data, f, default_flow_style=False, indent=2)
                else:
                    toml.dump(data, f)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to write configuration file {self.config_path}: {e}"
            ) from e
        
        return self.config_path
    
    def _config_to_dict(self, config: ToolConfig) -> Dict[str, Any]:
        return config.model_dump(mode="json", exclude_none=True)
