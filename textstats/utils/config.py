"""
Configuration management for the TextStats application.

This module provides configuration management, settings handling,
and application-wide parameter storage.
"""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, asdict

from .exceptions import ConfigurationError


log = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SECTIONS = ("processing", "output", "logging")


@dataclass
class Settings:
    """
    Application settings and configuration parameters.

    Attributes:
        processing: How text files are read
        output: Where report artifacts are written
        logging: Default logging behaviour of the CLI
    """
    processing: Dict[str, Any] = field(default_factory=lambda: {
        "encoding": "utf-8",
    })

    output: Dict[str, Any] = field(default_factory=lambda: {
        "default_output_dir": ".",
    })

    logging: Dict[str, Any] = field(default_factory=lambda: {
        "level": "WARNING",
    })


class Config:
    """
    Configuration manager for TextStats application.

    Provides centralized configuration management with support for:
    - Default settings
    - User configuration files
    - Runtime configuration changes
    """

    DEFAULT_CONFIG_FILE = "textstats_config.json"
    USER_CONFIG_DIR = Path.home() / ".config" / "textstats"

    def __init__(self, config_file: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to configuration file
        """
        self.settings = Settings()
        self.config_file = config_file or self.USER_CONFIG_DIR / self.DEFAULT_CONFIG_FILE
        self._load_configuration()

    def _load_configuration(self) -> None:
        """Load configuration from file if it exists."""
        if isinstance(self.config_file, str):
            self.config_file = Path(self.config_file)

        if not self.config_file.exists():
            log.debug("Using default configuration")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(f"Failed to load configuration from {self.config_file}: {e}")
            log.info("Using default configuration")
            return

        if not isinstance(config_data, dict):
            log.warning(f"Ignoring configuration in {self.config_file}: top level must be an object")
            return

        self._update_settings_from_dict(config_data)
        log.info(f"Configuration loaded from {self.config_file}")

    def _update_settings_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """
        Update settings from dictionary.

        Raises:
            ConfigurationError: If a known section is not a JSON object
        """
        for section in SECTIONS:
            if section not in config_dict:
                continue
            values = config_dict[section]
            if not isinstance(values, dict):
                raise ConfigurationError(
                    "Configuration section must be an object",
                    config_key=section,
                    config_value=repr(values),
                )
            getattr(self.settings, section).update(values)

    def save_configuration(self, config_file: Optional[Union[str, Path]] = None) -> None:
        """
        Save current configuration to file.

        Args:
            config_file: Optional path to save configuration file
        """
        try:
            save_path = config_file or self.config_file
            if isinstance(save_path, str):
                save_path = Path(save_path)

            save_path.parent.mkdir(parents=True, exist_ok=True)

            with open(save_path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self.settings), f, indent=2, ensure_ascii=False)

            log.info(f"Configuration saved to {save_path}")

        except Exception as e:
            log.error(f"Failed to save configuration: {e}")
            raise

    def get_processing_config(self) -> Dict[str, Any]:
        """Get processing configuration."""
        return self.settings.processing.copy()

    def get_output_config(self) -> Dict[str, Any]:
        """Get output configuration."""
        return self.settings.output.copy()

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.settings.logging.copy()

    def get_encoding(self) -> str:
        """Get the text encoding used to read input files."""
        return self.settings.processing.get("encoding", "utf-8")

    def get_output_dir(self) -> Path:
        """Get the directory report artifacts are written to."""
        return Path(self.settings.output.get("default_output_dir", "."))

    def set_output_dir(self, output_dir: Union[str, Path]) -> None:
        """
        Set the output directory.

        Args:
            output_dir: Directory for report artifacts
        """
        self.settings.output["default_output_dir"] = str(output_dir)
        log.debug(f"Output directory set to {output_dir}")

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self.settings = Settings()
        log.info("Configuration reset to defaults")

    def get_config_summary(self) -> str:
        """
        Get a summary of current configuration.

        Returns:
            Formatted configuration summary
        """
        summary = []
        summary.append("=== TextStats Configuration Summary ===")
        summary.append(f"Config file: {self.config_file}")

        for section_name, section in asdict(self.settings).items():
            summary.append("")
            summary.append(f"{section_name.capitalize()}:")
            for key, value in section.items():
                summary.append(f"  {key}: {value}")

        return "\n".join(summary)

    def validate_configuration(self) -> bool:
        """
        Validate current configuration.

        Returns:
            True if configuration is valid
        """
        for section in (self.settings.processing, self.settings.output, self.settings.logging):
            if not isinstance(section, dict):
                return False

        encoding = self.settings.processing.get("encoding")
        if not isinstance(encoding, str) or not encoding:
            return False
        try:
            codecs.lookup(encoding)
        except LookupError:
            return False

        output_dir = self.settings.output.get("default_output_dir")
        if not isinstance(output_dir, str) or not output_dir:
            return False

        level = self.settings.logging.get("level")
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            return False

        return True
