"""Shared pytest fixtures for the article pipeline tests."""

from pathlib import Path

import pytest

from article_pipeline.core.classification import SubjectClassifier
from article_pipeline.core.rendering import ArticleRenderer, TemplateService
from article_pipeline.core.youtube import get_videos
from shared.storage.storage_manager import StorageManager

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PROJECT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@pytest.fixture
def videos_path() -> Path:
    return FIXTURES_DIR / "playlist_videos.json"


@pytest.fixture
def entries_path() -> Path:
    return FIXTURES_DIR / "playlist_entries.json"


@pytest.fixture
def template_dir() -> Path:
    return FIXTURES_DIR / "templates"


@pytest.fixture
def project_templates_dir() -> Path:
    return PROJECT_TEMPLATES_DIR


@pytest.fixture
def videos(videos_path):
    return get_videos(videos_path)


@pytest.fixture
def first_video(videos):
    return videos[0]


@pytest.fixture
def template_service(template_dir) -> TemplateService:
    return TemplateService(template_dir, required_template="article.md")


@pytest.fixture
def renderer(template_service) -> ArticleRenderer:
    return ArticleRenderer(template_service, SubjectClassifier())


@pytest.fixture
def storage(tmp_path) -> StorageManager:
    return StorageManager(str(tmp_path / "storage"))


@pytest.fixture
def write_json(tmp_path):
    """Write ``text`` to a JSON file under tmp_path and return its path."""
    def _write(text: str, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
