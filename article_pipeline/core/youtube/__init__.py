"""
Playlist export records and loading
"""

from .models import PlaylistEntry, ResourceId, Snippet, Thumbnail, ThumbnailSet, Video
from .playlist_loader import MalformedInputError, get_playlist_entries, get_videos, load_items

__all__ = [
    "PlaylistEntry",
    "ResourceId",
    "Snippet",
    "Thumbnail",
    "ThumbnailSet",
    "Video",
    "MalformedInputError",
    "get_playlist_entries",
    "get_videos",
    "load_items",
]
