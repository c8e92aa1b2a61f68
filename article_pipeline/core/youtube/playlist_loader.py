"""
Playlist Loader
Reads a playlistItems JSON export and decodes its items into records
"""

import json
import logging
from pathlib import Path
from typing import List, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .models import PlaylistEntry, PlaylistRecord, Video

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=PlaylistRecord)


class MalformedInputError(Exception):
    """Raised when the export is not valid JSON or its items don't decode."""
    pass


def load_items(path: Union[str, Path], model: Type[RecordT]) -> List[RecordT]:
    """
    Load every element of the top-level ``items`` array as ``model``.

    Either the whole array decodes or the call fails; there are no
    partial results.

    Raises:
        OSError: If the file cannot be opened or read.
        MalformedInputError: If the document is not JSON, has no ``items``
            array, or any element does not match ``model``.
    """
    path = Path(path)

    with open(path, 'r', encoding='utf-8') as f:
        try:
            document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedInputError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(document, dict) or "items" not in document:
        raise MalformedInputError(f"{path} has no top-level 'items' field")

    items = document["items"]
    if not isinstance(items, list):
        raise MalformedInputError(
            f"'items' in {path} must be an array, got {type(items).__name__}"
        )

    try:
        records = TypeAdapter(List[model]).validate_python(items)
    except ValidationError as e:
        raise MalformedInputError(
            f"Could not decode items in {path} as {model.__name__}: {e}"
        ) from e

    logger.info(f"Loaded {len(records)} {model.__name__} records from {path}")
    return records


def get_playlist_entries(path: Union[str, Path]) -> List[PlaylistEntry]:
    """Load playlist membership records."""
    return load_items(path, PlaylistEntry)


def get_videos(path: Union[str, Path]) -> List[Video]:
    """Load full video records."""
    return load_items(path, Video)
