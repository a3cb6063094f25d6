"""Action API routes."""

import asyncio
from collections import deque
from typing import Deque, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from trakt_actions.adapters.events import LogNotifier, QueueEventPublisher
from trakt_actions.adapters.trakt.environment import TraktEnvironment
from trakt_actions.dispatcher import ActionDispatcher
from trakt_actions.domain.mapping import request_from_mapping
from trakt_actions.domain.models import ActionKind, InvalidActionRequest
from trakt_actions.domain.outcome import (
    AuthRequired,
    HardFailure,
    Outcome,
    SoftFailure,
    Success,
)
from trakt_actions.ports.inbound import ActionCompleteEvent
from trakt_actions.router import OutcomeRouter

action_router = APIRouter(prefix="/actions", tags=["Actions"])

# Completion events; drained into recent_events by the server
completion_events: asyncio.Queue = asyncio.Queue()
recent_events: Deque[ActionCompleteEvent] = deque(maxlen=50)

dispatcher = ActionDispatcher(
    TraktEnvironment(),
    OutcomeRouter(publisher=QueueEventPublisher(completion_events), notifier=LogNotifier()),
)


class ActionRequestModel(BaseModel):
    traktaction: str
    tvdbid: Optional[int] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    imdbid: Optional[str] = None
    tmdbid: Optional[int] = None
    message: Optional[str] = None
    rating: Optional[Union[int, str]] = None
    isspoiler: Optional[bool] = None


class OutcomeResponse(BaseModel):
    status: str  # "success" | "blocked" | "failure" | "auth_required" | "abandoned"
    message: Optional[str] = None
    error: Optional[str] = None
    wait_seconds: Optional[int] = None


class CompletionEventModel(BaseModel):
    request: dict
    success: bool


def outcome_to_response(outcome: Optional[Outcome]) -> OutcomeResponse:
    if isinstance(outcome, Success):
        return OutcomeResponse(status="success", message=outcome.message)
    if isinstance(outcome, SoftFailure):
        return OutcomeResponse(status="blocked", wait_seconds=outcome.wait_seconds)
    if isinstance(outcome, HardFailure):
        return OutcomeResponse(status="failure", error=outcome.error_message)
    if isinstance(outcome, AuthRequired):
        return OutcomeResponse(status="auth_required")
    return OutcomeResponse(status="abandoned")


@action_router.post("", response_model=OutcomeResponse)
async def submit_action(req: ActionRequestModel):
    try:
        request = request_from_mapping(req.model_dump(exclude_none=True))
    except InvalidActionRequest as e:
        raise HTTPException(status_code=422, detail=str(e))
    outcome = await dispatcher.submit(request)
    return outcome_to_response(outcome)


@action_router.get("/kinds", response_model=List[str])
async def list_kinds():
    return [kind.value for kind in ActionKind]


@action_router.get("/recent", response_model=List[CompletionEventModel])
async def list_recent():
    return [
        CompletionEventModel(request=e.request.to_mapping(), success=e.success)
        for e in reversed(recent_events)
    ]
