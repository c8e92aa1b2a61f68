"""Tests for the articles index report."""

from pathlib import Path

import pandas as pd
import pytest

from article_pipeline.core.writer import WrittenArticle
from article_pipeline.report import INDEX_FILENAME, ArticleReport


def article(filename, subject, video_id="vid"):
    return WrittenArticle(
        filename=filename,
        path=Path("/tmp") / filename,
        video_id=video_id,
        subject=subject,
        date="2022-12-10",
        title=f"Title for {filename}",
    )


@pytest.fixture
def articles():
    return [
        article("episode_0001.md", "echo", "a"),
        article("episode_0002.md", "rust-ga", "b"),
        article("episode_0003.md", "echo", "c"),
    ]


@pytest.mark.unit
def test_subject_counts(articles):
    counts = ArticleReport(articles).subject_counts()

    assert counts["echo"] == 2
    assert counts["rust-ga"] == 1
    assert counts.index[0] == "echo"


@pytest.mark.unit
def test_save_writes_index(articles, tmp_path):
    path = ArticleReport(articles).save(tmp_path)

    assert path == tmp_path / INDEX_FILENAME
    df = pd.read_csv(path)
    assert list(df.columns) == ["filename", "video_id", "subject", "date", "title"]
    assert df["filename"].tolist() == ["episode_0001.md", "episode_0002.md", "episode_0003.md"]


@pytest.mark.unit
def test_duplicate_filenames(articles):
    articles.append(article("episode_0002.md", "echo", "d"))

    assert ArticleReport(articles).duplicate_filenames() == ["episode_0002.md"]


@pytest.mark.unit
def test_same_video_written_twice_is_not_a_duplicate(articles):
    articles.append(article("episode_0002.md", "rust-ga", "b"))

    assert ArticleReport(articles).duplicate_filenames() == []


@pytest.mark.unit
def test_empty_report(tmp_path):
    report = ArticleReport([])

    assert report.frame.empty
    assert report.duplicate_filenames() == []
    assert report.save(tmp_path).exists()


@pytest.mark.unit
def test_print_summary(articles, capsys):
    articles.append(article("episode_0001.md", "echo", "z"))

    ArticleReport(articles).print_summary()

    out = capsys.readouterr().out
    assert "Articles written: 4" in out
    assert "echo" in out
    assert "episode_0001.md" in out
