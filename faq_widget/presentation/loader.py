"""
HTML Renderer - Render Tree to Markup

Walks a RenderTree with the widget's Jinja2 templates and produces the HTML
fragment a hosting page embeds. Every button carries its WidgetEvent as JSON
in a data attribute; the page posts it back unchanged.

FAQ text arrives from a remote service, so autoescaping is always on.
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .render_tree import RenderTree
from .templates import Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _check_templates_present():
    """Every Template constant needs a file on disk. Checked once at import."""
    missing = [
        TEMPLATES_DIR / f"{getattr(Template, name)}.jinja2"
        for name in dir(Template)
        if not name.startswith("_")
    ]
    missing = [path for path in missing if not path.exists()]
    if missing:
        raise FileNotFoundError(f"Widget templates missing: {missing}")


_check_templates_present()


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_html(tree: RenderTree) -> str:
    """
    Renders the whole widget (toggle plus, when open, the panel).

    Args:
        tree: Output of render_widget().

    Returns:
        An HTML fragment rooted at a single `div.faq-widget`.
    """
    template = _environment().get_template(f"{Template.WIDGET}.jinja2")
    return template.render(tree=tree)
