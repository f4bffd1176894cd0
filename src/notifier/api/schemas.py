"""Pydantic request/response models for the notifications API.

Schemas only check shape. Emptiness rules live in the domain (Content,
dispatch validation) so the API and the library reject the same requests.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class ContentRequest(BaseModel):
    title: str = Field(..., examples=["Order Confirmed"])
    plain_body: str = Field(..., examples=["Total: $42"])
    html_body: str | None = None
    action_url: str | None = Field(None, examples=["https://shop.example.com/orders/1"])
    action_text: str | None = Field(None, examples=["View"])


class DispatchRequest(BaseModel):
    user_id: str = Field(..., examples=["user-123"])
    contact: str = Field(..., examples=["jane@example.com"])
    content: ContentRequest
    deadline_seconds: float | None = Field(
        None,
        description="Overall time budget for the fan-out; server default when omitted",
    )


class UpdatePreferencesRequest(BaseModel):
    channels: list[str] = Field(..., examples=[["Email", "Push"]])


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class OutcomeResponse(BaseModel):
    channel: str
    status: str
    detail: str | None = None


class ChannelListResponse(BaseModel):
    channels: list[str]


class PreferencesResponse(BaseModel):
    user_id: str
    channels: list[str]
    is_default: bool
