"""
Jinja2 loader for fixed transcript text.

Transcripts are line oriented, so templates are rendered to a list of lines
that a transport can report one at a time.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .templates import Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _validate_templates():
    """Every Template constant must have a file. Fails fast at import."""
    for name in dir(Template):
        if name.startswith("_"):
            continue
        path = TEMPLATES_DIR / f"{getattr(Template, name)}.jinja2"
        if not path.exists():
            raise FileNotFoundError(f"Template missing: {path}")


_validate_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    # Plain text: no autoescaping, and a missing variable is an error.
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: str, **context) -> str:
    template = _get_environment().get_template(f"{template_name}.jinja2")
    return template.render(**context)


def render_lines(template_name: str, **context) -> List[str]:
    """
    Render a template and split it into lines, dropping trailing blank ones.

    Args:
        template_name: Name of the template file (without .jinja2 extension)
        **context: Variables to pass to the template
    """
    lines = render(template_name, **context).splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
