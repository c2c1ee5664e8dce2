"""Jinja2 template loader and rendering."""

from jinja2 import PackageLoader
from jinja2.sandbox import SandboxedEnvironment


_env = SandboxedEnvironment(
    loader=PackageLoader('llm_termai', 'templates'),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def render(template_name: str, **kwargs) -> str:
    """Render a Jinja2 template with the given variables.

    Args:
        template_name: Template file name (e.g., 'bashrc.sh.j2')
        **kwargs: Variables to pass to the template

    Returns:
        Rendered template string
    """
    template = _env.get_template(template_name)
    return template.render(**kwargs)
