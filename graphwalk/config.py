"""Configuration management with Pydantic.

Settings are read from a YAML (or JSON, which YAML parses) file and may be
overridden by ``GRAPHWALK_*`` environment variables before validation.
"""

import os
import threading
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_NAMES = ("graphwalk.yaml", "graphwalk.yml", "graphwalk.json")
TRUTHY_VALUES = ("true", "1", "yes")


class GraphwalkConfig(BaseModel):
    """Runtime settings for applications built on graphwalk.

    Attributes:
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render log events as JSON instead of console output
        demo_start_vertex: Vertex the demonstration traversals start from
    """

    logging_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    demo_start_vertex: int = Field(
        default=1,
        ge=0,
        description="Start vertex for the demo traversals",
    )

    @field_validator("logging_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GraphwalkConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated GraphwalkConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If the file is empty or not valid YAML
            pydantic.ValidationError: If a setting has an invalid value
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**cls._apply_env_overrides(config_data))

        logger.info(
            "configuration_loaded",
            logging_level=config.logging_level,
            json_logs=config.json_logs,
        )

        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply ``GRAPHWALK_<KEY>`` environment overrides to the raw settings."""
        env_overrides = {
            "logging_level": "GRAPHWALK_LOGGING_LEVEL",
            "json_logs": "GRAPHWALK_JSON_LOGS",
            "demo_start_vertex": "GRAPHWALK_DEMO_START_VERTEX",
        }

        for key, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            if key == "json_logs":
                config_data[key] = value.lower() in TRUTHY_VALUES
            elif key == "demo_start_vertex":
                config_data[key] = int(value)
            else:
                config_data[key] = value

            logger.debug("env_override_applied", env_var=env_var, config_key=key)

        return config_data


class ConfigManager:
    """Holds the process-wide configuration once it has been loaded."""

    _instance: GraphwalkConfig | None = None
    _init_lock: threading.Lock = threading.Lock()

    @classmethod
    def load_config(cls, config_path: str | Path | None = None) -> GraphwalkConfig:
        """Load configuration from file.

        Args:
            config_path: Path to configuration file. If None, looks for
                graphwalk.yaml, graphwalk.yml or graphwalk.json in the
                current directory.

        Raises:
            FileNotFoundError: If no config file is found
        """
        if config_path is None:
            for default_name in DEFAULT_CONFIG_NAMES:
                default_path = Path(default_name)
                if default_path.exists():
                    config_path = default_path
                    break
            else:
                msg = "No configuration file found. Expected " + ", ".join(DEFAULT_CONFIG_NAMES)
                raise FileNotFoundError(msg)

        return GraphwalkConfig.from_yaml(config_path)

    @classmethod
    def get_config(
        cls,
        config_path: str | Path | None = None,
        reload: bool = False,
    ) -> GraphwalkConfig:
        """Return the cached configuration, loading it on first use or reload."""
        if cls._instance is not None and not reload:
            return cls._instance

        with cls._init_lock:
            if cls._instance is None or reload:
                cls._instance = cls.load_config(config_path)

            return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        cls._instance = None


def load_config(config_path: str | Path | None = None) -> GraphwalkConfig:
    """Load configuration from file."""
    return ConfigManager.load_config(config_path)


def get_config(config_path: str | Path | None = None, reload: bool = False) -> GraphwalkConfig:
    """Get the cached configuration instance."""
    return ConfigManager.get_config(config_path, reload)


def reset_config() -> None:
    """Reset the cached configuration instance."""
    ConfigManager.reset_config()


__all__ = [
    "ConfigManager",
    "GraphwalkConfig",
    "get_config",
    "load_config",
    "reset_config",
]
