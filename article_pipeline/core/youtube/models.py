"""
Playlist Record Models
Typed representation of the YouTube playlistItems export
"""

from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PlaylistRecord(BaseModel):
    """
    Base model for records decoded from the export.

    Field names are snake_case in Python and camelCase in the JSON
    (``publishedAt``, ``resourceId.videoId``). Records are frozen and
    unknown keys such as ``channelId`` or ``position`` are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )


class PlaylistEntry(PlaylistRecord):
    """A playlist membership record."""

    kind: str
    etag: str
    id: str


class Thumbnail(PlaylistRecord):
    url: str
    width: int
    height: int


class ThumbnailSet(PlaylistRecord):
    """Resolutions YouTube provides; standard and maxres may be missing."""

    default: Thumbnail
    medium: Thumbnail
    high: Thumbnail
    standard: Optional[Thumbnail] = None
    maxres: Optional[Thumbnail] = None


class ResourceId(PlaylistRecord):
    """The underlying video, distinct from the playlist item id."""

    kind: str
    video_id: str


class Snippet(PlaylistRecord):
    published_at: AwareDatetime
    title: str
    description: str = Field(min_length=1)
    thumbnails: ThumbnailSet
    resource_id: ResourceId


class Video(PlaylistRecord):
    """
    A single playlist item with its snippet.

    The accessors below flatten the snippet for the renderer; the record
    itself is never modified after loading.
    """

    id: str
    snippet: Snippet

    @property
    def title(self) -> str:
        return self.snippet.title

    @property
    def description(self) -> str:
        return self.snippet.description

    @property
    def published_at(self) -> datetime:
        return self.snippet.published_at

    @property
    def video_id(self) -> str:
        return self.snippet.resource_id.video_id

    @property
    def short_description(self) -> str:
        """Text before the first newline of the description."""
        return self.snippet.description.split("\n", 1)[0]
