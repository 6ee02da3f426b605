"""Server configuration loaded from the environment or a YAML file."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .jsonrpc.repository import DuplicatePolicy
from .utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RPCDISPATCH_"


class ServerConfig(BaseModel):
    """Settings for a JSONRPCServer and its HTTP transport."""

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    max_workers: Optional[int] = Field(default=None, ge=1)
    expose_internal_errors: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_mapping(cls, values: Dict[str, Any]) -> "ServerConfig":
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid server configuration: {e}") from e

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Read ``RPCDISPATCH_*`` environment variables; unset ones keep defaults."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls.from_mapping(values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ServerConfig":
        try:
            with open(path) as f:
                values = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(values, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        logger.info(f"Loaded configuration from {path}")
        return cls.from_mapping(values)
