from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response

from guestbook.domain.entries import MAX_ENTRY_ID, EntryNotFoundError, InvalidEntryError
from guestbook.schemas.entry import EntryPayload, EntryRead
from guestbook.services.entry_service import EntryService

router = APIRouter(tags=["comments"])


def get_entry_service(request: Request) -> EntryService:
    svc = getattr(getattr(request.app, "state", None), "entry_service", None)
    if not svc:
        raise RuntimeError("EntryService nao configurado")
    return svc


@router.get("/comments", response_model=list[EntryRead])
def list_comments(service: EntryService = Depends(get_entry_service)):
    return [EntryRead.from_entry(e) for e in service.list_all()]


@router.get("/comment/{entry_id}", response_model=EntryRead)
def get_comment(entry_id: int = Path(..., ge=1, le=MAX_ENTRY_ID), service: EntryService = Depends(get_entry_service)):
    try:
        entry = service.get_by_id(entry_id)
    except EntryNotFoundError as exc:
        raise HTTPException(404, str(exc))
    return EntryRead.from_entry(entry)


@router.get("/user/{user}", response_model=list[EntryRead])
def list_user_comments(user: str, service: EntryService = Depends(get_entry_service)):
    return [EntryRead.from_entry(e) for e in service.get_by_user(user)]


@router.post("/add")
def add_comment(payload: EntryPayload, service: EntryService = Depends(get_entry_service)):
    try:
        service.create(payload.to_entry())
    except InvalidEntryError as exc:
        raise HTTPException(400, exc.message)
    return Response(status_code=200)


@router.post("/update")
def update_comment(payload: EntryPayload, service: EntryService = Depends(get_entry_service)):
    try:
        service.update(payload.to_entry())
    except InvalidEntryError as exc:
        raise HTTPException(400, exc.message)
    except EntryNotFoundError as exc:
        raise HTTPException(404, str(exc))
    return Response(status_code=200)


@router.delete("/comment/{entry_id}")
def delete_comment(entry_id: int = Path(..., ge=1, le=MAX_ENTRY_ID), service: EntryService = Depends(get_entry_service)):
    try:
        service.delete_by_id(entry_id)
    except EntryNotFoundError as exc:
        # historico: apagar id inexistente responde 500, nao 404
        raise HTTPException(500, str(exc))
    return Response(status_code=200)
