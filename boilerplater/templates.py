"""
Template engine wrapper for boilerplate files.

Provides a small interface over Jinja2 with case-conversion filters,
used when a template is rendered with variables before literal
replacements are applied.
"""

import re
from typing import Dict, Any

from jinja2 import Environment, StrictUndefined, TemplateError as JinjaTemplateError

from .logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def snake_case(value: str) -> str:
    """Convert string to snake_case."""
    # Insert underscore before uppercase letters
    s1 = re.sub("([a-z0-9])([A-Z])", r"\1_\2", str(value))
    # Replace spaces and hyphens with underscores
    s2 = re.sub(r"[-\s]+", "_", s1)
    return s2.lower()


def camel_case(value: str) -> str:
    """Convert string to camelCase."""
    parts = [p for p in snake_case(value).split("_") if p]
    if not parts:
        return str(value)
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


def pascal_case(value: str) -> str:
    """Convert string to PascalCase."""
    return "".join(p.capitalize() for p in snake_case(value).split("_") if p)


def kebab_case(value: str) -> str:
    """Convert string to kebab-case."""
    return "-".join(p for p in snake_case(value).split("_") if p)


class TemplateEngine:
    """Wrapper for a Jinja2 environment with naming filters."""

    def __init__(self):
        self._env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

        self._env.filters["snake_case"] = snake_case
        self._env.filters["camel_case"] = camel_case
        self._env.filters["pascal_case"] = pascal_case
        self._env.filters["kebab_case"] = kebab_case

    def render_string(self, template_string: str, variables: Dict[str, Any]) -> str:
        """
        Render a template string with the given variables.

        Args:
            template_string: Template content as string
            variables: Variables to pass to template

        Returns:
            Rendered content

        Raises:
            TemplateError: If the template is invalid or uses an undefined name
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**variables)
        except JinjaTemplateError as e:
            logger.debug("Template rendering failed: %s", e)
            raise TemplateError(f"Failed to render template string: {e}") from e
