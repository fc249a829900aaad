"""Load static dashboard content, optionally overridden from a JSON file."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from macha.config.settings import get_settings
from macha.content.defaults import DEFAULT_CONTENT
from macha.content.models import StaticContent
from macha.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def load_static_content(path: Optional[str | Path] = None) -> StaticContent:
    """
    Load static content from ``path``, or return the built-in content.

    The file uses the same camelCase keys as the API output; any other
    top-level key is rejected. Sections missing from the file keep their
    built-in value.

    Args:
        path: JSON file to read. None returns the defaults.

    Returns:
        Validated StaticContent.

    Raises:
        ConfigurationError: If the file cannot be read, has unknown sections,
            or does not validate.
    """
    if path is None:
        return DEFAULT_CONTENT

    try:
        overrides = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read static content file: {e}", "static_content_path") from e

    if not isinstance(overrides, dict):
        raise ConfigurationError("Static content file must hold a JSON object", "static_content_path")

    sections = {field.alias or name for name, field in StaticContent.model_fields.items()}
    unknown = sorted(set(overrides) - sections)
    if unknown:
        raise ConfigurationError(
            f"Unknown static content sections {unknown}; expected camelCase keys from {sorted(sections)}",
            "static_content_path",
        )

    merged = DEFAULT_CONTENT.model_dump(by_alias=True)
    merged.update(overrides)

    try:
        content = StaticContent.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid static content: {e}", "static_content_path") from e

    logger.info("static_content_loaded", path=str(path), sections=sorted(overrides))
    return content


@lru_cache
def get_static_content() -> StaticContent:
    """Static content for the configured path, loaded once per process."""
    return load_static_content(get_settings().static_content_path)
