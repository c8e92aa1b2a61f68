"""
Template Service
Jinja2 environment wrapper used to render article templates
"""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

import jinja2

from .text_transform import clean_text, toml_str

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Raised when a template is missing or fails to render."""
    pass


class TemplateService:
    """
    Service responsible for loading and rendering Markdown templates.

    Responsibilities:
    - Load templates from a single directory.
    - Register the ``clean_text`` and ``toml_str`` filters.
    - Fail on any undefined variable or filter instead of rendering blanks.
    - Report every Jinja2 failure as TemplateError.
    """

    def __init__(self, template_dir: Path, required_template: Optional[str] = None):
        """
        Initialize the TemplateService.

        Args:
            template_dir: Directory containing the templates.
            required_template: Template that must load now; a missing or
                broken one raises TemplateError at startup.
        """
        self._template_dir = Path(template_dir)
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self._template_dir)),
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._env.filters["clean_text"] = clean_text
        self._env.filters["toml_str"] = toml_str

        if required_template is not None:
            self._load(required_template)
            logger.info(f"✓ Template verified: {self._template_dir / required_template}")

    def _load(self, template_name: str) -> jinja2.Template:
        try:
            return self._env.get_template(template_name)
        except jinja2.TemplateNotFound as e:
            raise TemplateError(
                f"Template '{template_name}' not found in {self._template_dir}"
            ) from e
        except jinja2.TemplateError as e:
            raise TemplateError(f"Template '{template_name}' failed to compile: {e}") from e

    def template_names(self) -> List[str]:
        return self._env.list_templates()

    def render(self, template_name: str, variables: Mapping[str, Any]) -> str:
        """
        Render ``template_name`` with ``variables``.

        Raises:
            TemplateError: If the template is missing, refers to an undefined
                variable or filter, or fails while rendering.
        """
        template = self._load(template_name)
        try:
            return template.render(**variables)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render '{template_name}': {e}") from e

    def __repr__(self):
        return f"TemplateService(template_dir={self._template_dir})"
