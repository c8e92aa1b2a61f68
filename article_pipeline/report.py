"""
Article Pipeline - Batch Report
Index of the articles written in a run, with per-subject totals.
"""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

import pandas as pd

from .core.writer import WrittenArticle

logger = logging.getLogger(__name__)

INDEX_FILENAME = "articles_index.csv"
COLUMNS = ["filename", "video_id", "subject", "date", "title"]


class ArticleReport:
    """
    Collects written articles into a DataFrame and persists the index.
    """

    def __init__(self, articles: Iterable[WrittenArticle]):
        rows = [asdict(article) for article in articles]
        self._df = pd.DataFrame(rows, columns=COLUMNS)

    @property
    def frame(self) -> pd.DataFrame:
        return self._df

    def subject_counts(self) -> pd.Series:
        """Number of articles per subject, largest first."""
        return self._df["subject"].value_counts()

    def duplicate_filenames(self) -> list:
        """Filenames that more than one video mapped to."""
        distinct = self._df.drop_duplicates(subset=["filename", "video_id"])
        dupes = distinct.loc[distinct["filename"].duplicated(), "filename"]
        return sorted(set(dupes))

    def save(self, reports_dir: Path) -> Path:
        output_path = Path(reports_dir) / INDEX_FILENAME
        self._df.to_csv(output_path, index=False, encoding='utf-8')
        logger.info(f"Articles index saved to {output_path}")
        return output_path

    def print_summary(self):
        print("=" * 60)
        print(f"📝 Articles written: {len(self._df)}")
        for subject, count in self.subject_counts().items():
            print(f"   {subject:<12} {count}")

        dupes = self.duplicate_filenames()
        if dupes:
            print(f"⚠️  Overwritten filenames: {', '.join(dupes)}")
        print("=" * 60)
