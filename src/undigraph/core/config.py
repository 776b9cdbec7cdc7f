"""
Graph configuration.

GraphConfig holds the tunable options of a graph container. Configuration can
be built directly or loaded from a plain mapping (for example parsed from a
settings file), in which case the mapping is checked against a JSON schema
first.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "index_incidence": {"type": "boolean"},
        "log_rejections": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Options for a graph container.

    Attributes:
        index_incidence (bool): Maintain a vertex to incident edges index.
            Speeds up incident_edges and are_adjacent without changing
            their results.
        log_rejections (bool): Log rejected operations (invalid handles,
            duplicate elements) at DEBUG level before raising
    """

    index_incidence: bool = False
    log_rejections: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("index_incidence", "log_rejections"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Create a configuration from a mapping.

        Args:
            data (Mapping[str, Any]): Option names and values. Missing options
                keep their defaults.

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If data is not a mapping or does not match
                the schema
        """
        try:
            options = dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid graph configuration: expected a mapping, got {data!r}"
            ) from e
        try:
            json_validate(instance=options, schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**options)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)
