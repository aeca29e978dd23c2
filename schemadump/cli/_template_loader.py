"""
Private Jinja2 Template Loader for the schemadump CLI

Generated files are Elixir source, so autoescaping is off; undefined
template variables fail loudly.
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).parent / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    auto_reload=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True
)

# Expose only the helpers the templates need
jinja_env.globals.update({
    'len': len,
    'str': str,
})

__all__ = ['jinja_env', 'TEMPLATES_DIR']
