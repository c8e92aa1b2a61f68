"""
Article Renderer
Turns a video record into Markdown through the template service
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..classification import ConfigurationError, PLAYLIST_CODES, SubjectClassifier
from ..youtube.models import Video
from .template_service import TemplateService
from .text_transform import add_quotes, derive_filename

logger = logging.getLogger(__name__)


class ArticleRenderer:
    """
    Builds the template variables for a video and renders its article.

    Every collaborator is passed in, so tests can swap the template
    directory or the label tables.
    """

    def __init__(
        self,
        template_service: TemplateService,
        classifier: SubjectClassifier,
        template_name: str = "article.md",
        playlist_codes: Mapping[str, str] = PLAYLIST_CODES
    ):
        """
        Raises:
            ConfigurationError: If a classifier label has no playlist code.
        """
        missing = [label for label in classifier.labels if label not in playlist_codes]
        if missing:
            raise ConfigurationError(f"No playlist code for subject(s): {', '.join(missing)}")

        self._templates = template_service
        self._classifier = classifier
        self._template_name = template_name
        self._playlist_codes = playlist_codes

    @property
    def classifier(self) -> SubjectClassifier:
        return self._classifier

    def build_variables(self, video: Video, label: str) -> Dict[str, Any]:
        """
        Variable map consumed by the article template.

        ``title``, ``subject``, ``code`` and ``playlist_code`` are wrapped
        in double quotes so they can go straight into TOML front matter.
        ``body`` is the description exactly as loaded.
        """
        return {
            "title": add_quotes(video.title),
            "date": video.published_at.strftime("%Y-%m-%d"),
            "description": video.short_description,
            "subject": add_quotes(label),
            "code": add_quotes(video.video_id),
            "playlist_code": add_quotes(self._playlist_codes[label]),
            "body": video.description,
            "filename": derive_filename(video.title),
        }

    def render(self, video: Video, label: Optional[str] = None) -> str:
        """
        Render one video, classifying it first unless ``label`` is given.

        Raises:
            PatternNotFoundError: If the title has no episode number.
            TemplateError: If rendering fails.
        """
        if label is None:
            label = self._classifier.classify(video.description)
        variables = self.build_variables(video, label)
        logger.debug(f"Rendering {variables['filename']} as subject '{label}'")
        return self._templates.render(self._template_name, variables)
