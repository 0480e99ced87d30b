import json
from pathlib import Path

import pytest

from learnings_site.errors import ConfigError
from learnings_site.sources import load_sources


def test_load_sources_returns_document_ids(tmp_path: Path) -> None:
    path = tmp_path / "learnings.json"
    path.write_text(json.dumps({"googleDocs": ["abc", "def"]}), encoding="utf-8")
    assert load_sources(path).google_docs == ["abc", "def"]


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read configuration"):
        load_sources(tmp_path / "nope.json")


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "learnings.json"
    path.write_text("{googleDocs: [", encoding="utf-8")
    with pytest.raises(ConfigError, match="not valid JSON"):
        load_sources(path)


@pytest.mark.parametrize(
    "payload",
    [["abc"], {"googleDocs": "abc"}, {"googleDocs": [1, 2]}],
)
def test_malformed_structure_raises_config_error(tmp_path: Path, payload) -> None:
    path = tmp_path / "learnings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigError, match="malformed"):
        load_sources(path)
