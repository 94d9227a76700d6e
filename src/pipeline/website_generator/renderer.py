"""Page rendering utilities for the static video listing site.

This module turns a page template, the fixed set of reusable fragments
(header, navigation, footer) and a rendering context into final HTML text,
and writes that text to disk for the entry point.

System Boundaries
-----------------
- Templates are Jinja2 documents; fragments are pulled in with
  ``{% include "incl/header.html" %}`` and friends.
- The fragment set is an explicit immutable value (``FragmentSet``) passed
  into ``render_page``; nothing is resolved from module state.
- Every fragment is compiled before the page template is parsed, so a
  broken fragment fails the build even if no page includes it.
- Undefined context variables are errors (``StrictUndefined``). Output is
  not autoescaped: record bodies are already HTML, and templates escape
  plain-text fields explicitly with ``|e``.
- Rendering is all-or-nothing: a complete string or an exception.

Example
-------
>>> fragments = FragmentSet(header="<h1>{{ title }}</h1>", navigation="", footer="")
>>> render_page('{% include "incl/header.html" %}', fragments, {"title": "Hi"})
'<h1>Hi</h1>'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import jinja2

from src.config import FRAGMENT_NAMES
from src.exceptions import IoFailureError, RenderFailureError, TemplateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FragmentSet:
    """The three named template fragments shared by every page."""

    header: str
    navigation: str
    footer: str

    def as_mapping(self) -> dict[str, str]:
        """Return the fragments keyed by their include names."""
        return {
            FRAGMENT_NAMES[role]: getattr(self, role) for role in FRAGMENT_NAMES
        }


def load_template(path: Path) -> str:
    """Read a template or fragment file as UTF-8 text.

    Raises
    ------
    IoFailureError
        If the file cannot be read.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise IoFailureError(
            f"Could not read template {path}: {exc}", context={"path": str(path)}
        ) from exc


def load_fragments(template_dir: Path) -> FragmentSet:
    """Read the header, navigation and footer fragments from ``template_dir``.

    Parameters
    ----------
    template_dir : Path
        Directory containing the fragment files at their include names
        (see ``FRAGMENT_NAMES`` in ``src/config.py``).

    Returns
    -------
    FragmentSet
        The loaded fragments.

    Raises
    ------
    IoFailureError
        If any fragment file cannot be read.
    """
    return FragmentSet(
        **{
            role: load_template(template_dir / name)
            for role, name in FRAGMENT_NAMES.items()
        }
    )


def _build_environment(fragments: FragmentSet) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.DictLoader(fragments.as_mapping()),
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )
    for name in FRAGMENT_NAMES.values():
        try:
            env.get_template(name)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(
                f"Fragment {name} is invalid: {exc.message} (line {exc.lineno})",
                context={"path": name, "line": exc.lineno},
            ) from exc
    return env


def render_page(
    template_text: str,
    fragments: FragmentSet,
    context: Mapping[str, Any],
    template_name: str = "<template>",
) -> str:
    r"""Render a page template with the given fragments and context.

    Parameters
    ----------
    template_text : str
        Jinja2 source of the page.
    fragments : FragmentSet
        Fragments available to ``{% include %}``.
    context : Mapping[str, Any]
        Variables exposed to the template.
    template_name : str, optional
        Name used in error messages, typically the template's path.

    Returns
    -------
    str
        Fully rendered page.

    Raises
    ------
    TemplateError
        If the template or a fragment has a syntax error, or the template
        includes a name outside the fragment set.
    RenderFailureError
        If rendering fails, e.g. on an undefined variable.

    Examples
    --------
    >>> empty = FragmentSet(header="", navigation="", footer="")
    >>> render_page("{{ n }} items", empty, {"n": 0})
    '0 items'
    """
    env = _build_environment(fragments)
    try:
        template = env.from_string(template_text)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateError(
            f"Template {template_name} is invalid: {exc.message} (line {exc.lineno})",
            context={"path": template_name, "line": exc.lineno},
        ) from exc

    try:
        return template.render(dict(context))
    except jinja2.TemplateNotFound as exc:
        raise TemplateError(
            f"Template {template_name} includes unknown fragment {exc.name!r}",
            context={"path": template_name, "fragment": exc.name},
        ) from exc
    except Exception as exc:
        raise RenderFailureError(
            f"Rendering {template_name} failed: {exc}",
            context={"path": template_name},
        ) from exc


def write_html_output(html_content: str, output_file: Path) -> None:
    r"""Write the rendered HTML to disk, creating parent directories.

    Parameters
    ----------
    html_content : str
        Full HTML string to be written.
    output_file : Path
        Output file path.

    Raises
    ------
    IoFailureError
        If the directory cannot be created or the file cannot be written.

    Examples
    --------
    >>> import tempfile
    >>> from pathlib import Path
    >>> target = Path(tempfile.mkdtemp()) / "site" / "index.html"
    >>> write_html_output("<html></html>", target)
    >>> target.read_text(encoding="utf-8")
    '<html></html>'
    """
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        raise IoFailureError(
            f"Could not write {output_file}: {exc}",
            context={"path": str(output_file)},
        ) from exc
    logger.info("Wrote %d characters to %s", len(html_content), output_file)
