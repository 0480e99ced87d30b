from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import jinja2
import minify_html
from jinja2 import DictLoader, Environment, StrictUndefined

from learnings_site.aggregator import Catalog
from learnings_site.errors import RenderError, TemplateError
from learnings_site.settings import BuildSettings

logger = logging.getLogger("learnings_site.renderer")


def minify_template(source: str, name: str) -> str:
    """Minify template markup, leaving Jinja tags and expressions untouched."""
    try:
        return minify_html.minify(
            source,
            keep_closing_tags=True,
            keep_html_and_head_opening_tags=True,
            preserve_brace_template_syntax=True,
        )
    except Exception as exc:
        raise TemplateError(f"Cannot minify template {name}: {exc}") from exc


def load_templates(templates_dir: Path, pattern: str = "*.html") -> Environment:
    """Build a Jinja2 environment from every template file in a directory.

    Each file is registered under its stem and under its file name, so
    templates/index.html answers to both "index" and "index.html".
    """
    sources: Dict[str, str] = {}
    for path in sorted(Path(templates_dir).glob(pattern)):
        logger.debug("Loading template %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateError(f"Cannot read template {path}: {exc}") from exc
        minified = minify_template(raw, path.name)
        sources[path.stem] = minified
        sources[path.name] = minified

    env = Environment(
        loader=DictLoader(sources),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    for name in sources:
        try:
            env.get_template(name)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(f"Template {name} line {exc.lineno}: {exc.message}") from exc
    return env


def render_landing(catalog: Catalog, settings: BuildSettings) -> Path:
    env = load_templates(settings.templates_dir, settings.template_pattern)

    try:
        template = env.get_template(settings.index_template)
    except jinja2.TemplateNotFound as exc:
        raise RenderError(
            f"No template named {settings.index_template!r} in {settings.templates_dir}"
        ) from exc

    try:
        html = template.render(**catalog.as_context())
    except Exception as exc:
        raise RenderError(f"Rendering {settings.index_template!r} failed: {exc}") from exc

    output = settings.index_path
    try:
        output.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"Cannot write {output}: {exc}") from exc
    logger.info("Wrote landing page to %s", output)
    return output
