from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from leakchecker import config
from leakchecker.client import BreachCheckClient, SearchState, run_search

router = APIRouter(tags=["page"])

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# ---------------- Template filters ----------------
def format_date(value: Optional[str]) -> str:
    """'2019-04-22' -> 'April 22, 2019'. Unparseable values are shown as given."""
    if not value:
        return ""
    try:
        d = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{d:%B} {d.day}, {d.year}"


def format_number(value) -> str:
    try:
        return f"{int(value or 0):,}"
    except (TypeError, ValueError):
        return str(value)


def logo_url(path: Optional[str]) -> str:
    return f"{config.HIBP_SITE_URL}{path}" if path else ""


templates.env.filters["format_date"] = format_date
templates.env.filters["format_number"] = format_number
templates.env.filters["logo_url"] = logo_url
templates.env.globals["hibp_site_url"] = config.HIBP_SITE_URL


def get_breach_check_client() -> BreachCheckClient:
    return BreachCheckClient()


def render(request: Request, state: SearchState) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"state": state})


# ---------------- Routes ----------------
@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return render(request, SearchState())


@router.post("/", response_class=HTMLResponse)
async def search(
    request: Request,
    email: str = Form(""),
    client: BreachCheckClient = Depends(get_breach_check_client),
):
    state = await run_search(client, email)
    return render(request, state)
