"""
Subject Classifier
Assigns each video a subject label by keyword frequency
"""

import logging
from typing import Dict, Mapping, Sequence

from .subjects import SUBJECT_KEYWORDS

logger = logging.getLogger(__name__)

KEYWORDS_PER_SUBJECT = 3


class ConfigurationError(Exception):
    """Raised when a static lookup table is unusable."""
    pass


class SubjectClassifier:
    """
    Keyword-frequency classifier over a fixed, ordered label table.

    Responsibilities:
    - Score a description against every label's keywords.
    - Pick the highest score, the first declared label winning ties.
    """

    def __init__(self, subject_keywords: Mapping[str, Sequence[str]] = SUBJECT_KEYWORDS):
        """
        Args:
            subject_keywords: Ordered mapping of label -> exactly 3 keywords.

        Raises:
            ConfigurationError: If the table is empty or a label does not
                have exactly 3 keywords.
        """
        if not subject_keywords:
            raise ConfigurationError("Subject keyword table is empty")

        for label, keywords in subject_keywords.items():
            if len(keywords) != KEYWORDS_PER_SUBJECT:
                raise ConfigurationError(
                    f"Subject '{label}' must have {KEYWORDS_PER_SUBJECT} keywords, got {len(keywords)}"
                )

        self._keywords = {
            label: tuple(keyword.lower() for keyword in keywords)
            for label, keywords in subject_keywords.items()
        }

    @property
    def labels(self) -> tuple:
        return tuple(self._keywords)

    def scores(self, description: str) -> Dict[str, int]:
        """Per-label keyword totals, in table order."""
        text = description.lower()
        return {
            label: sum(text.count(keyword) for keyword in keywords)
            for label, keywords in self._keywords.items()
        }

    def classify(self, description: str) -> str:
        """Return the best-scoring label for ``description``."""
        scores = self.scores(description)

        best_label, best_score = None, -1
        for label, score in scores.items():
            # strict comparison keeps the earliest label on ties
            if score > best_score:
                best_label, best_score = label, score

        logger.debug(f"Subject scores {scores} -> {best_label}")
        return best_label
