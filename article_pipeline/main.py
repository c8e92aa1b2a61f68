"""
YouTube Playlist to Markdown - Article Pipeline
Renders playlist export items into Markdown articles
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from article_pipeline.core.classification import ConfigurationError, SubjectClassifier
from article_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from article_pipeline.core.rendering import (
    ArticleRenderer, PatternNotFoundError, TemplateError, TemplateService
)
from article_pipeline.core.writer import FilenameCollisionError, MarkdownWriter
from article_pipeline.core.youtube import MalformedInputError, get_playlist_entries, get_videos
from article_pipeline.report import ArticleReport
from shared.storage.storage_manager import StorageManager

DEFAULT_CONFIG_PATH = Path("config.yaml")

PIPELINE_ERRORS = (
    OSError,
    MalformedInputError,
    PatternNotFoundError,
    TemplateError,
    ConfigurationError,
    FilenameCollisionError,
)


def setup_logging(logs_dir: Path, level: str = "INFO") -> logging.Logger:
    """Configure logging with file and console handlers."""
    log_file = logs_dir / "article_pipeline.log"

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def load_configuration(config_path: Optional[Path]) -> AppConfig:
    """
    Load and validate application configuration.

    Without an explicit path, ./config.yaml is used when present and
    built-in defaults otherwise.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return AppConfig()
        config_path = DEFAULT_CONFIG_PATH

    try:
        return ConfigLoader(config_path).load()
    except FileNotFoundError as e:
        print(f"Configuration file not found: {e}", file=sys.stderr)
        sys.exit(1)
    except ConfigValidationError as e:
        print(f"Configuration validation failed: {e}", file=sys.stderr)
        sys.exit(1)


def build_renderer(config: AppConfig) -> ArticleRenderer:
    """Construct the renderer and its collaborators; fails fast on bad templates or tables."""
    templates = TemplateService(config.template_dir, required_template=config.template_name)
    return ArticleRenderer(templates, SubjectClassifier(), template_name=config.template_name)


def render_command(args: argparse.Namespace, config: AppConfig):
    """Print one video's article to stdout."""
    renderer = build_renderer(config)

    videos = get_videos(args.input)
    if not 0 <= args.index < len(videos):
        raise MalformedInputError(
            f"Item index {args.index} out of range; {args.input} has {len(videos)} items"
        )

    print(renderer.render(videos[args.index]))


def write_command(args: argparse.Namespace, config: AppConfig, logger: logging.Logger,
                  storage: StorageManager):
    """Render and write an article for every video in the input."""
    logger.info("=" * 60)
    logger.info("Article Pipeline - WRITE")
    logger.info("=" * 60)

    writer = MarkdownWriter(build_renderer(config), storage, on_collision=config.on_collision)
    videos = get_videos(args.input)

    written = []
    for video in videos:
        article = writer.write(video)
        print(article.filename)
        written.append(article)

    logger.info(f"✅ {len(written)} articles written to {storage.articles_path}")

    if config.write_report:
        report = ArticleReport(written)
        report.save(storage.reports_path)
        report.print_summary()


def entries_command(args: argparse.Namespace):
    """List the ids of a playlist-entries export."""
    for entry in get_playlist_entries(args.input):
        print(entry.id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article-pipeline",
        description="Convert a YouTube playlist export into Markdown articles."
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML configuration file (default: ./config.yaml if present).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Print one video's article to stdout.")
    render.add_argument("input", type=Path, help="playlistItems JSON export.")
    render.add_argument("--index", type=int, default=0, help="Item to render (default: first).")

    write = subparsers.add_parser("write", help="Write an article file for every video.")
    write.add_argument("input", type=Path, help="playlistItems JSON export.")

    entries = subparsers.add_parser("entries", help="List playlist entry ids.")
    entries.add_argument("input", type=Path, help="Playlist entries JSON export.")

    return parser


def main(argv: Optional[List[str]] = None):
    """Main execution entry for the Article Pipeline."""
    args = build_parser().parse_args(argv)
    config = load_configuration(args.config)

    try:
        storage = StorageManager(str(config.storage_root))
    except OSError as e:
        print(f"Cannot prepare storage at {config.storage_root}: {e}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(storage.logs_path, config.log_level)
    logger.debug(f"Using {config!r}")

    try:
        if args.command == "render":
            render_command(args, config)
        elif args.command == "write":
            write_command(args, config, logger, storage)
        else:
            entries_command(args)
    except PIPELINE_ERRORS as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
