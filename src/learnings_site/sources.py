from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from learnings_site.errors import ConfigError
from learnings_site.items import SourceConfig

logger = logging.getLogger("learnings_site.sources")


def load_sources(path: Path) -> SourceConfig:
    """Read the list of documents to export from a learnings.json file."""
    logger.info("Reading in configuration file %s", path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc

    logger.debug("Parsing configuration")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Configuration {path} is not valid JSON: {exc}") from exc

    try:
        sources = SourceConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Configuration {path} is malformed: {exc}") from exc

    logger.info("Found %d Google Doc source(s)", len(sources.google_docs))
    return sources
