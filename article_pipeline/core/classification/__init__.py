"""
Subject classification
"""

from .subject_classifier import ConfigurationError, SubjectClassifier
from .subjects import PLAYLIST_CODES, SUBJECT_KEYWORDS

__all__ = ["ConfigurationError", "SubjectClassifier", "PLAYLIST_CODES", "SUBJECT_KEYWORDS"]
