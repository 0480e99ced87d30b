from __future__ import annotations

import logging
import subprocess
from typing import Iterable, List

from learnings_site.errors import ExportError
from learnings_site.settings import BuildSettings

logger = logging.getLogger("learnings_site.exporter")


def converter_command(doc_id: str, settings: BuildSettings) -> List[str]:
    return [
        settings.converter,
        "export",
        "-f",
        settings.export_format,
        "-ga",
        settings.analytics_id,
        "-o",
        str(settings.learnings_dir),
        doc_id,
    ]


def export_lessons(doc_ids: Iterable[str], settings: BuildSettings) -> int:
    """Export every document with the converter, one at a time.

    The converter's output goes straight to our own stdout/stderr. The first
    document that fails stops the export.

    Returns the number of exported documents.
    """
    exported = 0
    for doc_id in doc_ids:
        logger.info("Building claat for gdoc: %s", doc_id)
        command = converter_command(doc_id, settings)
        logger.debug("Running %s", " ".join(command))
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError as exc:
            raise ExportError(
                f"Converter {settings.converter!r} could not be started: {exc}",
                doc_id=doc_id,
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise ExportError(
                f"Converter exited with status {exc.returncode} for {doc_id}",
                doc_id=doc_id,
            ) from exc
        except OSError as exc:
            raise ExportError(
                f"Converter failed for {doc_id}: {exc}", doc_id=doc_id
            ) from exc
        exported += 1
    return exported
