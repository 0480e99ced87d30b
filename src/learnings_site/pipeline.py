"""Run the build stages in order.

config -> clean output -> export lessons -> aggregate -> landing page -> statics

The first failing stage stops the build. Whatever was already written to the
build directory is left in place; the next build starts by removing it.
"""

from __future__ import annotations

import logging
import shutil

from learnings_site.aggregator import Catalog, collect_lessons
from learnings_site.errors import OutputError
from learnings_site.exporter import export_lessons
from learnings_site.renderer import render_landing
from learnings_site.settings import BuildSettings
from learnings_site.sources import load_sources
from learnings_site.statics import copy_statics

logger = logging.getLogger("learnings_site.pipeline")


def prepare_output_dir(settings: BuildSettings) -> None:
    build_dir = settings.build_dir
    try:
        if build_dir.exists():
            logger.info("Cleaning any past build in %s", build_dir)
            shutil.rmtree(build_dir)
        logger.info("Creating build directory %s", build_dir)
        build_dir.mkdir(parents=True)
    except OSError as exc:
        raise OutputError(f"Cannot prepare build directory {build_dir}: {exc}") from exc


def build(settings: BuildSettings) -> Catalog:
    sources = load_sources(settings.config_path)

    prepare_output_dir(settings)

    logger.info("Building claats for gdoc sources")
    export_lessons(sources.google_docs, settings)

    logger.info("Building landing page")
    catalog = collect_lessons(settings)
    render_landing(catalog, settings)

    logger.info("Adding statics")
    copy_statics(settings)

    logger.info(
        "Built %d lesson(s) across %d technologies",
        len(catalog.lessons),
        len(catalog.technologies),
    )
    return catalog
