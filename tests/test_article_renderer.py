"""Tests for the template service and the article renderer."""

import pytest

from article_pipeline.core.classification import ConfigurationError, SubjectClassifier
from article_pipeline.core.classification.subjects import RUST_GA_PLAYLIST
from article_pipeline.core.rendering import (
    ArticleRenderer,
    PatternNotFoundError,
    TemplateError,
    TemplateService,
)
from article_pipeline.core.youtube import Video


def make_video(first_video, **snippet_changes) -> Video:
    snippet = first_video.snippet.model_copy(update=snippet_changes)
    return first_video.model_copy(update={"snippet": snippet})


# =============================================================================
# TemplateService
# =============================================================================


class TestTemplateService:

    @pytest.mark.unit
    def test_lists_templates(self, template_service):
        assert "article.md" in template_service.template_names()

    @pytest.mark.unit
    def test_project_template_directory_has_article(self, project_templates_dir):
        service = TemplateService(project_templates_dir, required_template="article.md")
        assert service.template_names() == ["article.md"]

    @pytest.mark.unit
    def test_missing_required_template_fails_at_construction(self, template_dir):
        with pytest.raises(TemplateError, match="not found"):
            TemplateService(template_dir, required_template="missing.md")

    @pytest.mark.unit
    def test_missing_template_at_render(self, template_service):
        with pytest.raises(TemplateError):
            template_service.render("missing.md", {})

    @pytest.mark.unit
    def test_undefined_variable_is_an_error(self, template_service):
        with pytest.raises(TemplateError, match="author"):
            template_service.render("undefined_variable.md", {"title": "t"})

    @pytest.mark.unit
    def test_unknown_filter_is_an_error(self, template_service):
        with pytest.raises(TemplateError):
            template_service.render("unknown_filter.md", {"body": "b"})

    @pytest.mark.unit
    def test_no_html_escaping(self, template_service, renderer, first_video):
        video = make_video(first_video, description="Use <T> & 'friends'\nmore")
        variables = renderer.build_variables(video, "rust-ga")

        text = template_service.render("article.md", variables)

        assert "summary: Use <T> & 'friends'" in text


# =============================================================================
# ArticleRenderer
# =============================================================================


class TestBuildVariables:

    @pytest.mark.unit
    def test_first_video_context(self, renderer, first_video):
        label = renderer.classifier.classify(first_video.description)
        variables = renderer.build_variables(first_video, label)

        assert variables["title"] == '"Rust GA Episode 61: Finishing mutation"'
        assert variables["date"] == "2022-12-10"
        assert variables["description"] == "The second half of another really productive day!"
        assert variables["subject"] == '"rust-ga"'
        assert variables["code"] == '"w5txUqNEbMg"'
        assert variables["playlist_code"] == f'"{RUST_GA_PLAYLIST}"'
        assert variables["body"] == first_video.description
        assert variables["filename"] == "episode_0061.md"

    @pytest.mark.unit
    def test_date_uses_recorded_offset(self, renderer, first_video):
        # 20:30 at -06:00 is already 12-11 in UTC
        assert first_video.published_at.isoformat() == "2022-12-10T20:30:00-06:00"
        assert renderer.build_variables(first_video, "rust-ga")["date"] == "2022-12-10"

    @pytest.mark.unit
    def test_single_line_description(self, renderer, first_video):
        video = make_video(first_video, description="Only one line")
        variables = renderer.build_variables(video, "echo")

        assert variables["description"] == "Only one line"
        assert variables["body"] == "Only one line"

    @pytest.mark.unit
    def test_title_without_episode_fails(self, renderer, first_video):
        video = make_video(first_video, title="A video without a number")

        with pytest.raises(PatternNotFoundError):
            renderer.build_variables(video, "echo")

    @pytest.mark.unit
    def test_label_without_playlist_code_fails_at_construction(self, template_service):
        classifier = SubjectClassifier({"cooking": ("pan", "oven", "knife")})

        with pytest.raises(ConfigurationError, match="cooking"):
            ArticleRenderer(template_service, classifier)


class TestRender:

    @pytest.mark.unit
    def test_renders_fixture_template(self, renderer, first_video):
        text = renderer.render(first_video)

        assert text.startswith('title: "Rust GA Episode 61: Finishing mutation"\n')
        assert 'subject: "rust-ga"' in text
        assert "file: episode_0061.md" in text
        assert "summary: The second half of another really productive day!" in text
        assert text.endswith("https://github.com/unhindered/rust-ga\n")

    @pytest.mark.unit
    def test_explicit_label_skips_classification(self, renderer, first_video):
        assert 'subject: "echo"' in renderer.render(first_video, "echo")

    @pytest.mark.unit
    def test_project_article_template(self, first_video, project_templates_dir):
        service = TemplateService(project_templates_dir, required_template="article.md")
        renderer = ArticleRenderer(service, SubjectClassifier())

        text = renderer.render(first_video)

        assert text.startswith("+++\n")
        assert 'title = "Rust GA Episode 61: Finishing mutation"' in text
        assert "date = 2022-12-10" in text
        assert 'description = "The second half of another really productive day!"' in text
        assert 'subject = ["rust-ga"]' in text
        assert 'youtube_code = "w5txUqNEbMg"' in text
        assert f'playlist_code = "{RUST_GA_PLAYLIST}"' in text
        assert "We got the population code in rust-ga working" in text

    @pytest.mark.unit
    def test_body_filter_unescapes_literal_sequences(self, renderer, first_video):
        video = make_video(first_video, description='Intro\\nSecond line with \\"quotes\\" inside')

        text = renderer.render(video, "echo")

        assert text.endswith('Intro\nSecond line with "quotes" inside\n')

    @pytest.mark.unit
    def test_body_ending_in_escaped_quote(self, renderer, first_video):
        video = make_video(first_video, description='Intro\nShe said \\"done\\"')

        text = renderer.render(video, "echo")

        assert text.endswith('Intro\nShe said "done"\n')

    @pytest.mark.unit
    def test_project_template_escapes_description_for_toml(self, first_video, project_templates_dir):
        service = TemplateService(project_templates_dir, required_template="article.md")
        renderer = ArticleRenderer(service, SubjectClassifier())
        video = make_video(first_video, description='A "quoted" C:\\path day\nrest')

        text = renderer.render(video, "echo")

        assert 'description = "A \\"quoted\\" C:\\\\path day"' in text
