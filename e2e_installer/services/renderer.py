"""Script template rendering with Jinja2."""

import logging
from collections.abc import Mapping
from typing import Any

import jinja2

from e2e_installer.models import ScriptParams
from e2e_installer.services.errors import TemplateError

logger = logging.getLogger(__name__)

# Undefined placeholders must fail instead of rendering as empty strings.
_env = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render(template: str, params: ScriptParams | Mapping[str, Any]) -> str:
    """Render a script template with the given parameters.

    Args:
        template: Template text using ``{{ name }}`` placeholders
        params: Script parameters or a plain mapping of named values

    Returns:
        Fully substituted script text

    Raises:
        TemplateError: If the template is malformed or references a
            field missing from params
    """
    context = params.as_context() if isinstance(params, ScriptParams) else dict(params)
    bad_names = [name for name in context if not isinstance(name, str)]
    if bad_names:
        raise TemplateError(f"parameter names must be strings, got {bad_names!r}")

    try:
        compiled = _env.from_string(template)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(f"error parsing template: {e}", e) from e

    try:
        script = compiled.render(context)
    except jinja2.TemplateError as e:
        raise TemplateError(f"error executing template: {e}", e) from e

    logger.debug("Rendered script (%d bytes)", len(script))
    return script
