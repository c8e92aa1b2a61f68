"""
Markdown Writer
Renders videos and persists one article file per video
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from shared.storage.storage_manager import StorageManager

from ..config.config_loader import COLLISION_POLICIES
from ..rendering import ArticleRenderer, derive_filename
from ..youtube.models import Video

logger = logging.getLogger(__name__)


class FilenameCollisionError(Exception):
    """Raised when two videos in one run map to the same article file."""
    pass


@dataclass(frozen=True)
class WrittenArticle:
    """Summary of one article written to disk."""
    filename: str
    path: Path
    video_id: str
    subject: str
    date: str
    title: str


class MarkdownWriter:
    """
    Service responsible for writing rendered articles.

    Existing files are replaced unconditionally. Within a single writer's
    lifetime a second video mapping to an already written filename is
    either logged and overwritten ("overwrite") or refused ("error").
    """

    def __init__(self, renderer: ArticleRenderer, storage: StorageManager, on_collision: str = "overwrite"):
        """
        Raises:
            ValueError: If ``on_collision`` is not a known policy.
        """
        if on_collision not in COLLISION_POLICIES:
            raise ValueError(
                f"Unknown collision policy {on_collision!r}; expected one of {', '.join(COLLISION_POLICIES)}"
            )

        self._renderer = renderer
        self._storage = storage
        self._on_collision = on_collision
        self._written: Dict[str, str] = {}

    def write(self, video: Video) -> WrittenArticle:
        """
        Render ``video`` and write it under the articles directory.

        Raises:
            PatternNotFoundError: If the title has no episode number.
            FilenameCollisionError: On a repeated filename with the "error" policy.
            TemplateError: If rendering fails.
            OSError: On any filesystem failure.
        """
        filename = derive_filename(video.title)

        previous = self._written.get(filename)
        if previous is not None and previous != video.id:
            if self._on_collision == "error":
                raise FilenameCollisionError(
                    f"{filename} already written for item {previous}, refusing to overwrite with {video.id}"
                )
            logger.warning(f"{filename} already written for item {previous}; overwriting with {video.id}")

        label = self._renderer.classifier.classify(video.description)
        markdown = self._renderer.render(video, label)
        path = self._storage.write_text(self._storage.articles_path, filename, markdown)
        self._written[filename] = video.id

        logger.info(f"✓ Article written: {filename} ({label})")
        return WrittenArticle(
            filename=filename,
            path=path,
            video_id=video.video_id,
            subject=label,
            date=video.published_at.strftime("%Y-%m-%d"),
            title=video.title
        )

    def write_all(self, videos: Iterable[Video]) -> List[WrittenArticle]:
        """Write every video in order, stopping at the first error."""
        return [self.write(video) for video in videos]
