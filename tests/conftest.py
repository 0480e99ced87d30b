from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from learnings_site.settings import BuildSettings  # noqa: E402

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<body>
  <ul>
    {% for tech in technologies %}
    <li data-tech="{{ tech }}">{{ tech }}: {{ mappings[tech] | length }}</li>
    {% endfor %}
  </ul>
  {% for lesson in learnings %}
  <a href="{{ lesson.url }}">{{ lesson.title }}</a>
  {% endfor %}
</body>
</html>
"""


@pytest.fixture
def settings(tmp_path: Path) -> BuildSettings:
    """Settings pointing every directory inside tmp_path."""
    return BuildSettings(
        config_path=tmp_path / "learnings.json",
        build_dir=tmp_path / "build",
        templates_dir=tmp_path / "templates",
        statics_dir=tmp_path / "statics",
    )


@pytest.fixture
def write_lesson(settings: BuildSettings) -> Callable[..., Path]:
    """Write a codelab.json the way the converter would."""

    def _write(lesson_id: str, **fields: Any) -> Path:
        payload = {
            "environment": "web",
            "id": lesson_id,
            "title": lesson_id.replace("-", " ").title(),
            "category": ["cloud"],
            "tags": [],
            "url": lesson_id,
        }
        payload.update(fields)
        lesson_dir = settings.learnings_dir / lesson_id
        lesson_dir.mkdir(parents=True, exist_ok=True)
        path = lesson_dir / settings.metadata_name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def index_template(settings: BuildSettings) -> Path:
    settings.templates_dir.mkdir(parents=True, exist_ok=True)
    path = settings.templates_dir / "index.html"
    path.write_text(INDEX_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def index_source() -> str:
    return INDEX_TEMPLATE
