"""Render the bundled Jinja2 templates for generated configuration files."""

from pathlib import Path

import jinja2

_TEMPLATES_DIR = Path(__file__).parent


def render_template(template_name: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Trailing newlines are kept so rendered files end exactly as the
    template does.

    Args:
        template_name: Filename within src/hookwiz/templates/
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template file does not exist
    """
    template_path = _TEMPLATES_DIR / template_name
    if not template_path.is_file():
        raise FileNotFoundError(f"Template not found: {template_path}")
    source = template_path.read_text(encoding="utf-8")
    template = jinja2.Template(source, keep_trailing_newline=True, trim_blocks=True)
    return template.render(**kwargs)
