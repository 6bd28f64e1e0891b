from pathlib import Path
from typing import Dict, Any

from fastapi.templating import Jinja2Templates
from starlette.requests import Request

from tracker.rendering.context_builder import to_summary_model


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _render(template_name: str, context: Dict[str, Any]) -> str:
    request = context.get("request")
    if request is None:
        request = Request(scope={"type": "http"})
    template = templates.get_template(template_name)
    return template.render({**context, "request": request})


def render_meeting_list_html(context: Dict[str, Any]) -> str:
    rows = [to_summary_model(m) for m in context.get("meetings", [])]
    return _render("meetings.html", {**context, "rows": rows})


def render_meeting_detail_html(context: Dict[str, Any]) -> str:
    return _render("meeting_detail.html", context)


def render_new_meeting_html(context: Dict[str, Any]) -> str:
    return _render("meeting_new.html", context)
