"""Notification API routes."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from telenotify.domain.cancel import CancelToken
from telenotify.domain.errors import Cancelled, FetchFailed, ResolveTimeout, SendFailure
from telenotify.domain.notifier import Notifier

notify_router = APIRouter(prefix="/notify", tags=["Notify"])

notifier: Optional[Notifier] = None


def set_notifier(instance: Optional[Notifier]) -> None:
    global notifier
    notifier = instance


def _require_notifier() -> Notifier:
    if notifier is None:
        raise HTTPException(status_code=503, detail="Telegram notifier not configured")
    return notifier


class ReceiversRequest(BaseModel):
    chat_ids: List[int]


class ReceiversResponse(BaseModel):
    chat_ids: List[int]


class ResolveRequest(BaseModel):
    username: str = Field(min_length=1)
    timeout: float = Field(default=60.0, gt=0)


class ResolveResponse(BaseModel):
    username: str
    chat_id: int


class SendRequest(BaseModel):
    subject: str
    body: str
    timeout: Optional[float] = Field(default=None, gt=0)


class SendResponse(BaseModel):
    success: bool
    recipients: int


@notify_router.get("/receivers", response_model=ReceiversResponse)
async def list_receivers():
    return ReceiversResponse(chat_ids=list(_require_notifier().receivers))


@notify_router.post("/receivers", response_model=ReceiversResponse)
async def add_receivers(req: ReceiversRequest):
    current = _require_notifier()
    current.add_receivers(*req.chat_ids)
    return ReceiversResponse(chat_ids=list(current.receivers))


@notify_router.post("/resolve", response_model=ResolveResponse)
async def resolve(req: ResolveRequest):
    current = _require_notifier()
    try:
        chat_id = await current.get_chat_id(req.username, req.timeout)
    except ResolveTimeout as e:
        raise HTTPException(status_code=504, detail=str(e))
    except FetchFailed as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ResolveResponse(username=req.username, chat_id=chat_id)


@notify_router.post("/send", response_model=SendResponse)
async def send(req: SendRequest):
    current = _require_notifier()
    token = CancelToken.with_timeout(req.timeout) if req.timeout else None
    recipients = current.receivers
    try:
        await current.send(req.subject, req.body, token=token)
    except SendFailure as e:
        raise HTTPException(status_code=502, detail={"error": str(e), "chat_id": e.chat_id})
    except Cancelled as e:
        raise HTTPException(status_code=504, detail=str(e))
    return SendResponse(success=True, recipients=len(recipients))
