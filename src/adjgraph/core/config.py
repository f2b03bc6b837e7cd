"""
Graph configuration.

This module provides the ``GraphConfig`` settings object shared by the graph
classes and the path finding engine. Configuration can be built directly, from
a mapping validated against a JSON schema, or from environment variables.

Example:
    >>> config = GraphConfig.from_dict({"default_weight": 1, "max_memory_mb": 256})
    >>> graph = DirectedGraph(config=config)
"""

import logging
import math
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Constants
DEFAULT_EDGE_WEIGHT = 1
ENV_PREFIX = "ADJGRAPH_"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "default_weight": {"type": "number"},
        "max_memory_mb": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "log_level": {"type": "string", "enum": LOG_LEVELS},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Settings for graph instances.

    Attributes:
        default_weight: Weight given to edges added without an explicit weight.
            Edges carrying any other weight mark the graph as weighted.
        max_memory_mb: Optional memory budget for a single path search.
            None disables the memory guard.
        log_level: Level applied by ``configure_logging``.
    """

    default_weight: float = DEFAULT_EDGE_WEIGHT
    max_memory_mb: Optional[float] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.default_weight, bool) or not isinstance(
            self.default_weight, (int, float)
        ):
            raise ConfigurationError("default_weight must be a numeric value")
        if not math.isfinite(self.default_weight):
            raise ConfigurationError("default_weight must be finite")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a mapping.

        Args:
            data: Mapping with any of the ``GraphConfig`` fields

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GraphConfig":
        """Build a configuration from ``ADJGRAPH_*`` environment variables."""
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        raw_weight = environ.get(f"{ENV_PREFIX}DEFAULT_WEIGHT")
        if raw_weight is not None:
            data["default_weight"] = _parse_number("DEFAULT_WEIGHT", raw_weight)

        raw_memory = environ.get(f"{ENV_PREFIX}MAX_MEMORY_MB")
        if raw_memory:
            data["max_memory_mb"] = _parse_number("MAX_MEMORY_MB", raw_memory)

        raw_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if raw_level:
            data["log_level"] = raw_level.upper()

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_number(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be numeric, got {raw!r}") from e
    return int(value) if value.is_integer() else value


def configure_logging(config: Optional[GraphConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The library itself never installs handlers; applications call this once
    when they want the library's log output on stderr.

    Returns:
        logging.Logger: The configured ``adjgraph`` logger
    """
    config = config or GraphConfig()
    package_logger = logging.getLogger("adjgraph")
    package_logger.setLevel(config.log_level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
