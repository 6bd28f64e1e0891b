from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Form, HTTPException, Query, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from tracker.core.config import load_config
from tracker.meetings.models import Meeting, MeetingPurpose
from tracker.meetings.phone import dial_uri
from tracker.meetings.selectors import select_tab
from tracker.meetings.store import get_meeting_store
from tracker.observability.logger import log_event
from tracker.rendering.context_builder import (
    build_detail_context,
    build_list_context,
    build_new_meeting_context,
    to_detail_model,
    to_summary_model,
)
from tracker.rendering.html_renderer import (
    render_meeting_detail_html,
    render_meeting_list_html,
    render_new_meeting_html,
)
from tracker.schemas.meetings import (
    DeleteAtRequest,
    DeleteByIdsRequest,
    DeleteResult,
    MeetingCreateRequest,
    MeetingDetailModel,
    MeetingListModel,
)
from tracker.utils.clock import local_now


router = APIRouter()


def _require_api_key_if_configured(request: Request) -> None:
    """Require API key if configured in environment."""
    cfg = load_config()
    if not cfg.api_key:
        return
    provided = request.headers.get("x-api-key") or request.headers.get("X-API-Key")
    if provided != cfg.api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


def _wants_json(request: Request, format: Optional[str]) -> bool:
    accept_json = request.headers.get("accept", "").startswith("application/json")
    return accept_json or format == "json"


def _get_meeting_or_404(meeting_id: UUID) -> Meeting:
    meeting = get_meeting_store().get(meeting_id)
    if meeting is None:
        raise HTTPException(status_code=404, detail=f"Meeting {meeting_id} not found")
    return meeting


def _add_meeting(source: str, **fields) -> Meeting:
    meeting = Meeting(**fields)
    get_meeting_store().add(meeting)
    log_event(action="created", source=source, count=1, meeting_id=meeting.id, purpose=meeting.purpose.label)
    return meeting


def _parse_form_date(value: str):
    """Parse an HTML date input (YYYY-MM-DD), keeping the current time of day. Empty means now."""
    now = local_now()
    if not value:
        return now
    try:
        picked = datetime.strptime(value, "%Y-%m-%d").date()
        return datetime.combine(picked, now.timetz())
    except ValueError:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid date format: '{value}'. Expected format: YYYY-MM-DD (e.g., 2026-10-19)"
        )


def _list_response(request: Request, tab: str, q: str, format: Optional[str]):
    context = build_list_context(tab, q)

    if _wants_json(request, format):
        model = MeetingListModel(
            tab=tab,
            title=context["title"],
            query=q,
            now=context["now"],
            meetings=[to_summary_model(m) for m in context["meetings"]],
        )
        return JSONResponse(content=model.model_dump(mode="json"))

    context["request"] = request
    return HTMLResponse(content=render_meeting_list_html(context))


@router.get("/upcoming")
async def list_upcoming(
    request: Request,
    q: str = Query("", description="Search name, company or position"),
    format: Optional[str] = Query(None, description="Response format: json"),
):
    """Meetings at or after the current time. HTML by default, JSON on request."""
    _require_api_key_if_configured(request)
    return _list_response(request, "upcoming", q, format)


@router.get("/history")
async def list_history(
    request: Request,
    q: str = Query("", description="Search name, company or position"),
    format: Optional[str] = Query(None, description="Response format: json"),
):
    """Meetings before the current time. HTML by default, JSON on request."""
    _require_api_key_if_configured(request)
    return _list_response(request, "history", q, format)


@router.get("/purposes")
async def list_purposes(request: Request) -> List[str]:
    _require_api_key_if_configured(request)
    return MeetingPurpose.labels()


@router.get("/new", response_class=HTMLResponse)
async def new_meeting_form(request: Request) -> HTMLResponse:
    _require_api_key_if_configured(request)
    context = build_new_meeting_context()
    context["request"] = request
    return HTMLResponse(content=render_new_meeting_html(context))


@router.post("/new")
async def submit_new_meeting(
    request: Request,
    name: str = Form(..., min_length=1),
    company: str = Form(..., min_length=1),
    position: str = Form(..., min_length=1),
    phone_number: str = Form(..., min_length=1),
    date: str = Form(""),
    purpose: MeetingPurpose = Form(MeetingPurpose.NETWORKING),
    notes: str = Form(""),
) -> RedirectResponse:
    """Handle the HTML add form, then show the new meeting."""
    _require_api_key_if_configured(request)

    meeting = _add_meeting(
        name=name,
        company=company,
        position=position,
        phone_number=phone_number,
        date=_parse_form_date(date),
        purpose=purpose,
        notes=notes,
        source="form",
    )
    return RedirectResponse(url=f"/meetings/{meeting.id}", status_code=303)


@router.post("", status_code=201, response_model=MeetingDetailModel)
async def create_meeting(request: Request, payload: MeetingCreateRequest) -> MeetingDetailModel:
    """
    Record a new meeting.

    Name, company, position and phone number must be non-empty; the model
    itself accepts anything, so the check lives here.
    """
    _require_api_key_if_configured(request)

    meeting = _add_meeting(
        name=payload.name,
        company=payload.company,
        position=payload.position,
        phone_number=payload.phone_number,
        date=payload.date or local_now(),
        purpose=payload.purpose,
        notes=payload.notes,
        source="api",
    )
    return to_detail_model(meeting)


@router.post("/delete", response_model=DeleteResult)
async def delete_meetings(request: Request, payload: DeleteByIdsRequest) -> DeleteResult:
    """Delete meetings by id. Unknown ids are ignored."""
    _require_api_key_if_configured(request)
    deleted = get_meeting_store().delete(payload.ids)
    return DeleteResult(deleted=deleted)


@router.post("/{tab}/delete", response_model=DeleteResult)
async def delete_meetings_at(
    request: Request,
    tab: Literal["upcoming", "history"],
    payload: DeleteAtRequest,
) -> DeleteResult:
    """
    Delete meetings by their position in a tab.

    Offsets refer to the tab as currently displayed, i.e. filtered by ``q``.
    """
    _require_api_key_if_configured(request)
    store = get_meeting_store()
    view = select_tab(store.snapshot(), tab, payload.q)
    deleted = store.delete_at(view, payload.offsets)
    return DeleteResult(deleted=deleted)


@router.get("/{meeting_id}")
async def meeting_detail(
    request: Request,
    meeting_id: UUID,
    format: Optional[str] = Query(None, description="Response format: json"),
):
    _require_api_key_if_configured(request)
    meeting = _get_meeting_or_404(meeting_id)

    if _wants_json(request, format):
        return JSONResponse(content=to_detail_model(meeting).model_dump(mode="json"))

    context = build_detail_context(meeting)
    context["request"] = request
    return HTMLResponse(content=render_meeting_detail_html(context))


@router.get("/{meeting_id}/dial")
async def dial_meeting(request: Request, meeting_id: UUID) -> RedirectResponse:
    """Redirect to the tel URI so the client's dialer handles the call."""
    _require_api_key_if_configured(request)
    meeting = _get_meeting_or_404(meeting_id)
    return RedirectResponse(url=dial_uri(meeting.phone_number), status_code=307)


@router.delete("/{meeting_id}", status_code=204)
async def delete_meeting(request: Request, meeting_id: UUID) -> Response:
    _require_api_key_if_configured(request)
    get_meeting_store().delete({meeting_id})
    return Response(status_code=204)


@router.post("/{meeting_id}/remove")
async def remove_meeting(
    request: Request,
    meeting_id: UUID,
    tab: Literal["upcoming", "history"] = Form("upcoming"),
) -> RedirectResponse:
    """Delete button on the HTML pages; returns to the tab the user came from."""
    _require_api_key_if_configured(request)
    get_meeting_store().delete({meeting_id})
    return RedirectResponse(url=f"/meetings/{tab}", status_code=303)
