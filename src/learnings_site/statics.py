from __future__ import annotations

import logging
import shutil
from pathlib import Path

from learnings_site.errors import CopyError
from learnings_site.settings import BuildSettings

logger = logging.getLogger("learnings_site.statics")


def copy_statics(settings: BuildSettings) -> int:
    """Copy each top-level entry of the statics directory into the build.

    Returns the number of entries copied.
    """
    statics_dir = Path(settings.statics_dir)
    if not statics_dir.is_dir():
        logger.warning("No statics directory at %s, nothing to copy", statics_dir)
        return 0

    copied = 0
    for source in sorted(statics_dir.iterdir()):
        dest = settings.build_dir / source.name
        logger.debug("Copying %s to %s", source, dest)
        try:
            if source.is_dir():
                shutil.copytree(source, dest, dirs_exist_ok=True)
            else:
                shutil.copy2(source, dest)
        except OSError as exc:
            raise CopyError(f"Cannot copy {source} to {dest}: {exc}") from exc
        copied += 1
    return copied
