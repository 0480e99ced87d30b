# Build settings for learnings_site
#
# Every path and constant a build needs lives here so the stages never reach
# for the working directory on their own.

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class BuildSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # JSON file listing the documents to export
    config_path: Path = Path("learnings.json")
    # Output tree, wiped at the start of every build
    build_dir: Path = Path("build")
    # Folder under build_dir that the converter writes lessons into
    learnings_folder: str = "learnings"
    # Metadata file the converter writes into every lesson directory
    metadata_name: str = "codelab.json"

    templates_dir: Path = Path("templates")
    template_pattern: str = "*.html"
    index_template: str = "index"
    index_output: str = "index.html"

    statics_dir: Path = Path("statics")

    # External converter invocation
    converter: str = "claat"
    export_format: str = "html"
    analytics_id: str = "UA-88560603-1"

    # Category every lesson is expected to carry (only warned about)
    expected_category: str = "cloud"

    @property
    def learnings_dir(self) -> Path:
        return self.build_dir / self.learnings_folder

    @property
    def index_path(self) -> Path:
        return self.build_dir / self.index_output

    @property
    def url_prefix(self) -> str:
        """Prefix that makes a lesson URL valid from the site root."""
        return f"{self.learnings_folder}/"
