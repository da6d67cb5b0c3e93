from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from makos.analytics import Gtag
from makos.site import SITE_METADATA

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["site"] = SITE_METADATA


def render(
    request: Request,
    name: str,
    context: Optional[dict] = None,
    status_code: int = 200,
) -> Response:
    """Render a page inside the root layout."""
    gtag = getattr(request.state, "gtag", None)
    page = {
        "gtag": gtag,
        "measurement_id": gtag.measurement_id if gtag else None,
        "page_title": None,
        "page_description": None,
    }
    page.update(context or {})
    return templates.TemplateResponse(request, name, page, status_code=status_code)
