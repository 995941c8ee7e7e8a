from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# JSON keys are camelCase, Python fields snake_case
_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Request DTOs
class URLCreateRequest(BaseModel):
    # Left optional so a missing url is reported as 400 by the service
    url: Optional[str] = None


# Response DTOs
class URLInfoResponse(BaseModel):
    model_config = _camel

    short_code: str
    short_url: str
    original_url: str
    click_count: int
    created_at: datetime


class URLStatsResponse(BaseModel):
    model_config = _camel

    short_code: str
    original_url: str
    click_count: int
    created_at: datetime
    last_clicked_at: Optional[datetime] = None


class URLRecordResponse(BaseModel):
    model_config = _camel

    id: int
    short_code: str
    original_url: str
    created_at: datetime
    click_count: int
    last_clicked_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class ServiceInfo(BaseModel):
    message: str
    version: str
    endpoints: Dict[str, str]
