from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field

from gqlform import log
from gqlform.form.models import FieldResolver


class ResolverConfig(BaseModel):
    """Resolver overrides loaded from a YAML file."""

    model_config = ConfigDict(extra="forbid")

    resolvers: dict[str, FieldResolver] = Field(default_factory=dict)


def load_resolver_config(config_path: Path | None) -> ResolverConfig | None:
    """
    Load and validate resolver overrides from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None to skip loading.

    Returns:
        A validated ResolverConfig, or None if config_path is None.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against ResolverConfig fails.
    """
    if config_path is None:
        log.debug("No resolver config provided")
        return None

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug("Loaded resolver config from %s", config_path)

    # Treat empty file or explicit YAML null as "no overrides"
    if raw is None or raw == {}:
        return ResolverConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Resolver config root must be a mapping (YAML object), got {type(raw).__name__}")

    return ResolverConfig.model_validate(cast(dict[str, Any], raw))
