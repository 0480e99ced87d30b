"""
Build the learnings landing page.

Exports every Google Doc listed in learnings.json with claat, indexes the
exported codelabs by technology and renders templates/index.html into the
build directory together with the static assets.

Usage: learnings-site [--config FILE] [--build-dir DIR] [--templates-dir DIR] [--statics-dir DIR]
"""

import logging
import sys
from pathlib import Path

import click

from learnings_site.errors import BuildError
from learnings_site.pipeline import build
from learnings_site.settings import BuildSettings

logger = logging.getLogger("learnings_site")

DEFAULTS = BuildSettings()


@click.command()
@click.option(
    "--config",
    "config_path",
    default=str(DEFAULTS.config_path),
    type=click.Path(path_type=Path),
    help="JSON file listing the Google Docs to export",
)
@click.option(
    "--build-dir",
    default=str(DEFAULTS.build_dir),
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory, removed and recreated on every run",
)
@click.option(
    "--templates-dir",
    default=str(DEFAULTS.templates_dir),
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the landing page templates",
)
@click.option(
    "--statics-dir",
    default=str(DEFAULTS.statics_dir),
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory whose contents are copied into the build",
)
@click.option("--converter", default=DEFAULTS.converter, help="claat executable")
@click.option(
    "--analytics-id", default=DEFAULTS.analytics_id, help="Google Analytics id for lessons"
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    config_path, build_dir, templates_dir, statics_dir, converter, analytics_id, verbose
):
    """Build the learnings site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    settings = BuildSettings(
        config_path=config_path,
        build_dir=build_dir,
        templates_dir=templates_dir,
        statics_dir=statics_dir,
        converter=converter,
        analytics_id=analytics_id,
    )

    try:
        build(settings)
    except BuildError as exc:
        logger.error("%s failed: %s", exc.stage, exc)
        sys.exit(1)
    except OSError as exc:
        logger.error("build failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
