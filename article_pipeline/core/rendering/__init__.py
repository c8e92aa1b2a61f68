"""
Markdown rendering: text transforms, templates and the article renderer
"""

from .article_renderer import ArticleRenderer
from .template_service import TemplateError, TemplateService
from .text_transform import PatternNotFoundError, add_quotes, clean_text, derive_filename, toml_str

__all__ = [
    "ArticleRenderer",
    "TemplateError",
    "TemplateService",
    "PatternNotFoundError",
    "add_quotes",
    "clean_text",
    "derive_filename",
    "toml_str",
]
