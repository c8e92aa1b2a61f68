"""
Storage Manager for the article pipeline
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Service responsible for the local output directory layout.

    Responsibilities:
    - Create and validate the storage directory structure.
    - Provide canonical paths for articles, reports and logs.
    - Write text files into those directories.
    """

    def __init__(self, storage_root: str = "./storage"):
        """
        Initialize the StorageManager.

        Args:
            storage_root (str): The base directory for all storage.
        """
        self._root = Path(storage_root).resolve()

        self._articles_dir = self._root / "articles"
        self._reports_dir = self._root / "reports"
        self._logs_dir = self._root / "logs"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensures that all required storage directories exist."""
        dirs = [
            self._articles_dir,
            self._reports_dir,
            self._logs_dir
        ]
        for d in dirs:
            d.mkdir(parents=True, exist_ok=True)
            logger.debug(f"✓ Storage directory verified: {d}")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def articles_path(self) -> Path:
        return self._articles_dir

    @property
    def reports_path(self) -> Path:
        return self._reports_dir

    @property
    def logs_path(self) -> Path:
        return self._logs_dir

    def write_text(self, destination_dir: Path, filename: str, text: str) -> Path:
        """
        Writes ``text`` to ``destination_dir / filename``, replacing any
        existing file. OSError propagates to the caller.
        """
        destination = destination_dir / filename
        with open(destination, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.debug(f"✓ Wrote {len(text)} chars to {destination}")
        return destination

    def __repr__(self):
        return f"StorageManager(root={self.root})"
