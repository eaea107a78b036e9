"""Muhurat form session endpoints.

Each endpoint mirrors one action on the form: typing a city, picking a
suggestion, choosing a date, submitting, switching language or resetting.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, HTTPException
from typing import Optional

from ..i18n.resolve import translate
from ..schemas import (
    CitySelection,
    CityTextUpdate,
    CreateSessionRequest,
    DateUpdate,
    LanguageUpdate,
    SessionViewModel,
)
from ..services.muhurat_client import MuhuratFetchError
from ..services.render import render_session
from ..services.session_controller import (
    SessionController,
    SessionValidationError,
    SubmissionInProgressError,
)
from ..services import session_store


router = APIRouter(prefix="/v1/sessions", tags=["sessions"])


def _controller(sid: str) -> SessionController:
    controller = session_store.STORE.get(sid)
    if controller is None:
        raise HTTPException(status_code=404, detail="SESSION_NOT_FOUND")
    return controller


def _view(sid: str, controller: SessionController) -> SessionViewModel:
    return render_session(sid, controller.snapshot())


@router.post("", response_model=SessionViewModel, status_code=201)
def create_session(req: Optional[CreateSessionRequest] = None) -> SessionViewModel:
    sid = session_store.STORE.create(req.lang if req else None)
    return _view(sid, _controller(sid))


@router.get("/{sid}", response_model=SessionViewModel)
def get_session(sid: str) -> SessionViewModel:
    return _view(sid, _controller(sid))


@router.delete("/{sid}", status_code=204)
def delete_session(sid: str) -> None:
    if not session_store.STORE.drop(sid):
        raise HTTPException(status_code=404, detail="SESSION_NOT_FOUND")


@router.put("/{sid}/date", response_model=SessionViewModel)
def set_date(sid: str, req: DateUpdate) -> SessionViewModel:
    controller = _controller(sid)
    try:
        controller.set_date(req.date)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid date: {req.date!r}") from exc
    return _view(sid, controller)


@router.put(
    "/{sid}/city",
    response_model=SessionViewModel,
    summary="Update the city text and refresh suggestions",
)
def update_city(
    sid: str,
    req: CityTextUpdate = Body(
        ...,
        openapi_examples={"ahmedabad": {"summary": "Partial city name", "value": {"text": "ahm"}}},
    ),
) -> SessionViewModel:
    controller = _controller(sid)
    controller.update_city_text(req.text)
    return _view(sid, controller)


@router.post("/{sid}/select", response_model=SessionViewModel)
def select_city(sid: str, req: CitySelection) -> SessionViewModel:
    controller = _controller(sid)
    try:
        controller.select_city(req.index)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail="SUGGESTION_NOT_FOUND") from exc
    return _view(sid, controller)


@router.post(
    "/{sid}/submit",
    response_model=SessionViewModel,
    summary="Fetch the muhurat for the selected city and date",
)
def submit(sid: str) -> SessionViewModel:
    controller = _controller(sid)
    lang = controller.lang
    try:
        controller.submit()
    except SessionValidationError as exc:
        raise HTTPException(status_code=400, detail=translate(exc.prompt_key, lang)) from exc
    except SubmissionInProgressError as exc:
        raise HTTPException(status_code=409, detail=translate(exc.prompt_key, lang)) from exc
    except MuhuratFetchError as exc:
        raise HTTPException(status_code=502, detail=translate("fetchError", lang)) from exc
    return _view(sid, controller)


@router.post("/{sid}/reset", response_model=SessionViewModel)
def reset(sid: str) -> SessionViewModel:
    controller = _controller(sid)
    controller.reset()
    return _view(sid, controller)


@router.put("/{sid}/language", response_model=SessionViewModel)
def set_language(sid: str, req: LanguageUpdate) -> SessionViewModel:
    controller = _controller(sid)
    controller.set_language(req.lang)
    return _view(sid, controller)
