"""Collect exported lesson metadata into the landing page index.

Every lesson directory written by the converter holds a metadata file. Those
files are decoded into LessonRecord objects, their URLs are rewritten so they
resolve from the site root, and the records are grouped by lower-cased tag.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from learnings_site.errors import ParseError
from learnings_site.items import LessonRecord
from learnings_site.settings import BuildSettings

logger = logging.getLogger("learnings_site.aggregator")

TagIndex = Dict[str, List[LessonRecord]]


@dataclass(frozen=True)
class Catalog:
    lessons: List[LessonRecord]
    mappings: TagIndex
    technologies: List[str]

    def as_context(self) -> dict:
        """Variables exposed to the landing page template."""
        return {
            "technologies": self.technologies,
            "mappings": self.mappings,
            "learnings": self.lessons,
        }


def find_metadata_files(learnings_dir: Path, metadata_name: str) -> List[Path]:
    return sorted(Path(learnings_dir).glob(f"*/{metadata_name}"))


def load_lesson(path: Path, url_prefix: str) -> LessonRecord:
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(path, f"cannot read metadata: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(path, f"invalid JSON: {exc}") from exc

    try:
        # A bare null decodes to an empty record
        record = LessonRecord.model_validate({} if data is None else data)
    except ValidationError as exc:
        raise ParseError(path, f"unexpected metadata: {exc}") from exc

    return record.with_url_prefix(url_prefix)


def build_tag_index(lessons: List[LessonRecord]) -> TagIndex:
    mappings: TagIndex = {}
    for lesson in lessons:
        # A lesson tagged both "GCP" and "gcp" lands in the bucket twice
        for tech in lesson.tag_keys():
            mappings.setdefault(tech, []).append(lesson)
    return mappings


def list_technologies(mappings: TagIndex) -> List[str]:
    return sorted(mappings)


def check_conventions(lesson: LessonRecord, path: Path, expected_category: str) -> None:
    """Warn about metadata that breaks the catalogue conventions."""
    if expected_category not in lesson.category:
        logger.warning(
            "%s: category %s does not include %r",
            path,
            lesson.category,
            expected_category,
        )
    if not lesson.tags:
        logger.warning("%s: no tags, lesson will not appear in the index", path)


def collect_lessons(settings: BuildSettings) -> Catalog:
    files = find_metadata_files(settings.learnings_dir, settings.metadata_name)
    logger.info("Found %d lesson metadata file(s) in %s", len(files), settings.learnings_dir)

    lessons: List[LessonRecord] = []
    for path in files:
        lesson = load_lesson(path, settings.url_prefix)
        check_conventions(lesson, path, settings.expected_category)
        logger.debug("Loaded lesson %r from %s", lesson.id, path)
        lessons.append(lesson)

    mappings = build_tag_index(lessons)
    return Catalog(
        lessons=lessons,
        mappings=mappings,
        technologies=list_technologies(mappings),
    )
