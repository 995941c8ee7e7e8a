# re-export common schemas for simpler imports
from .url import (
    ErrorResponse,
    MessageResponse,
    ServiceInfo,
    URLCreateRequest,
    URLInfoResponse,
    URLRecordResponse,
    URLStatsResponse,
)

__all__ = [
    "URLCreateRequest",
    "URLInfoResponse",
    "URLStatsResponse",
    "URLRecordResponse",
    "MessageResponse",
    "ErrorResponse",
    "ServiceInfo",
]
