"""
Application Configuration Model
Represents a validated configuration state
"""

from pathlib import Path


class AppConfig:
    """
    Immutable configuration object for the article pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        storage_root: Path = Path("./storage"),
        template_dir: Path = Path("./templates"),
        template_name: str = "article.md",
        on_collision: str = "overwrite",
        write_report: bool = True,
        log_level: str = "INFO"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            storage_root: Root directory for articles, reports and logs
            template_dir: Directory holding the article templates
            template_name: Name of the template used for every article
            on_collision: "overwrite" or "error" when two videos share a filename
            write_report: Whether the batch command writes the articles index
            log_level: Logging level name
        """
        self._storage_root = Path(storage_root)
        self._template_dir = Path(template_dir)
        self._template_name = template_name
        self._on_collision = on_collision
        self._write_report = write_report
        self._log_level = log_level

    @property
    def storage_root(self) -> Path:
        """Root directory for storage."""
        return self._storage_root

    @property
    def template_dir(self) -> Path:
        """Directory searched for templates."""
        return self._template_dir

    @property
    def template_name(self) -> str:
        """Template rendered for each video."""
        return self._template_name

    @property
    def on_collision(self) -> str:
        """Filename collision policy."""
        return self._on_collision

    @property
    def write_report(self) -> bool:
        """Whether to write the articles index after a batch run."""
        return self._write_report

    @property
    def log_level(self) -> str:
        """Logging level name."""
        return self._log_level

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(storage_root={str(self.storage_root)!r}, "
            f"template={self.template_name!r}, "
            f"on_collision={self.on_collision!r}, "
            f"log_level={self.log_level!r})"
        )
