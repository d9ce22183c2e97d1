from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ProviderName(str, Enum):
    BACKGROUND_REMOVAL = "background_removal"
    VIDEO_LOOKUP = "video_lookup"


class TranslationMode(str, Enum):
    DATA_URI = "data_uri"
    JSON_PASSTHROUGH = "json_passthrough"


class GatewayState(str, Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    DISPATCHING = "DISPATCHING"
    TRANSLATING = "TRANSLATING"
    RESPONDED = "RESPONDED"


# ---------------------------------------------------------------------------
# Request-scoped data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UploadedFile:
    content: bytes
    original_name: str
    mime_type: str
    size_bytes: int

    def __post_init__(self) -> None:
        if self.size_bytes != len(self.content):
            raise ValueError(
                f"size_bytes ({self.size_bytes}) does not match content length ({len(self.content)})"
            )


@dataclass(frozen=True)
class ProviderRequest:
    provider: ProviderName
    method: str
    target_url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, Tuple[str, bytes, str]] = field(default_factory=dict)   # field -> (filename, bytes, mime)


@dataclass(frozen=True)
class ProviderResponse:
    status_code: int
    content_type: str
    raw_body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def text(self, limit: int = 500) -> str:
        """Decoded body prefix, for logging only."""
        return self.raw_body[:limit].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class GatewaySuccess:
    payload: Dict[str, Any]
    http_status: int = 200


@dataclass(frozen=True)
class GatewayFailure:
    http_status: int
    message: str
    metadata: Dict[str, Any] = field(default_factory=dict)


GatewayResult = Union[GatewaySuccess, GatewayFailure]


# ---------------------------------------------------------------------------
# Abstract provider transport
# ---------------------------------------------------------------------------

class ProviderTransport(ABC):
    """Every provider transport (real HTTP or mock) must implement this interface."""

    @abstractmethod
    async def send(self, request: ProviderRequest) -> ProviderResponse:
        """Perform one outbound call. Non-2xx statuses are returned, not raised."""