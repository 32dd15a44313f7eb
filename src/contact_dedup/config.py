"""
Configuration utilities for ContactDedup.

Provides configuration loading and validation for the pipeline. Scoring
weights and thresholds are fixed in the matching engine and are not
configurable here.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/contact_dedup.yaml"

SUPPORTED_LOCALES = ("es", "en")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_default_config() -> Dict[str, Any]:
    """
    Get default pipeline configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "input": {
            "path": "Code Assessment - Find Duplicates Input.xlsx",
            "sheet": 0
        },
        "processing": {
            "max_workers": 1
        },
        "reporting": {
            "locale": "es",
            "show_statistics": False
        },
        "logging": {
            "level": "INFO"
        }
    }


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Args:
        base_config: Base configuration
        override_config: Override configuration

    Returns:
        Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load pipeline configuration from YAML file, layered over the defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    defaults = get_default_config()
    config_file = Path(config_path)

    if not config_file.exists():
        logger.warning(f"Configuration file {config_path} not found, using defaults")
        return defaults

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration from {config_path}: {e}")
        return defaults

    if not isinstance(config, dict):
        logger.error(f"Configuration in {config_path} is not a mapping, using defaults")
        return defaults

    logger.info(f"Loaded configuration from {config_path}")
    return merge_configs(defaults, config)


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate pipeline configuration.

    Args:
        config: Configuration dictionary

    Returns:
        True if configuration is valid, False otherwise
    """
    required_sections = ["input", "processing", "reporting"]

    for section in required_sections:
        if not isinstance(config.get(section), dict):
            logger.error(f"Missing required configuration section: {section}")
            return False

    input_config = config["input"]
    if not isinstance(input_config.get("path", ""), str):
        logger.error("input.path must be a string")
        return False

    if not isinstance(input_config.get("sheet", 0), (int, str)):
        logger.error("input.sheet must be a sheet index or name")
        return False

    max_workers = config["processing"].get("max_workers", 1)
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        logger.error("processing.max_workers must be a positive integer")
        return False

    reporting_config = config["reporting"]
    if reporting_config.get("locale", "es") not in SUPPORTED_LOCALES:
        logger.error(f"reporting.locale must be one of {SUPPORTED_LOCALES}")
        return False

    if not isinstance(reporting_config.get("show_statistics", False), bool):
        logger.error("reporting.show_statistics must be a boolean")
        return False

    level = config.get("logging", {}).get("level", "INFO")
    if level not in LOG_LEVELS:
        logger.error(f"logging.level must be one of {LOG_LEVELS}")
        return False

    logger.info("Configuration validation passed")
    return True
