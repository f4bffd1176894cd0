"""FastAPI routes for the notifications API.

Thin adapters that translate HTTP requests into dispatcher calls.
No business logic, just schema→domain→response translation.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from notifier.api.schemas import (
    ChannelListResponse,
    DispatchRequest,
    OutcomeResponse,
    PreferencesResponse,
    StatusResponse,
    UpdatePreferencesRequest,
)
from notifier.bootstrap import Container
from notifier.content import Content
from notifier.utils.logging import add_context, clear_context, get_logger

router = APIRouter(prefix="/notifications", tags=["notifications"])

logger = get_logger(__name__)


def get_container(request: Request) -> Container:
    return request.app.state.container


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
@router.post(
    "",
    status_code=202,
    response_model=list[OutcomeResponse],
    response_model_exclude_none=True,
)
async def send_notification(
    body: DispatchRequest,
    container: Container = Depends(get_container),
) -> list[OutcomeResponse]:
    """Fan a notification out to the user's preferred channels."""
    add_context(user_id=body.user_id)
    try:
        content = Content(**body.content.model_dump())
        outcomes = await run_in_threadpool(
            container.dispatcher.dispatch,
            body.user_id,
            body.contact,
            content,
            body.deadline_seconds,
        )
        logger.debug("Dispatch request handled", attempted=len(outcomes))
    finally:
        clear_context()

    return [OutcomeResponse(**outcome.to_dict()) for outcome in outcomes]


# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------
@router.get("/channels", response_model=ChannelListResponse)
async def list_channels(container: Container = Depends(get_container)) -> ChannelListResponse:
    """List the channels currently registered."""
    return ChannelListResponse(channels=container.dispatcher.list_channel_names())


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------
@router.get("/preferences/{user_id}", response_model=PreferencesResponse)
async def get_preferences(user_id: str, container: Container = Depends(get_container)) -> PreferencesResponse:
    """Get a user's channel preferences (every available channel when none are stored)."""
    return PreferencesResponse(
        user_id=user_id,
        channels=container.dispatcher.get_preferences(user_id),
        is_default=not container.preferences.has_preferences(user_id),
    )


@router.put("/preferences/{user_id}", response_model=StatusResponse)
async def update_preferences(
    user_id: str,
    body: UpdatePreferencesRequest,
    container: Container = Depends(get_container),
) -> StatusResponse:
    """Replace a user's channel preferences."""
    container.dispatcher.set_preferences(user_id, body.channels)
    return StatusResponse()


@router.delete("/preferences/{user_id}", response_model=StatusResponse)
async def clear_preferences(user_id: str, container: Container = Depends(get_container)) -> StatusResponse:
    """Drop a user's stored preferences so the default applies again."""
    container.preferences.delete(user_id)
    return StatusResponse()
