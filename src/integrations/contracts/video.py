"""
Video lookup contract.

The video-metadata provider answers with a JSON document describing the
downloadable media variants of a page. The gateway forwards that document
unchanged; this model only checks that it is a JSON object before it is
forwarded, so a malformed upstream answer fails closed instead of reaching
the caller.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaVariant(BaseModel):
    model_config = ConfigDict(extra="allow")

    link: Optional[str] = None
    quality: Optional[str] = None


class VideoLookupPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    links: List[MediaVariant] = Field(default_factory=list)
