from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from transport_booking.core.config import settings

WEB_DIR = Path(__file__).resolve().parent
STATIC_DIR = WEB_DIR / "static"

templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))

router = APIRouter(tags=["web"], include_in_schema=False)


def _page(request: Request, name: str) -> HTMLResponse:
    return templates.TemplateResponse(request, name, {"app_name": settings.APP_NAME})


@router.get("/")
def home():
    return RedirectResponse(url="/login.html", status_code=302)


@router.get("/login.html", response_class=HTMLResponse)
def login_page(request: Request):
    return _page(request, "login.html")


@router.get("/register.html", response_class=HTMLResponse)
def register_page(request: Request):
    return _page(request, "register.html")


@router.get("/index.html", response_class=HTMLResponse)
def booking_page(request: Request):
    return _page(request, "index.html")


@router.get("/tracking.html", response_class=HTMLResponse)
def tracking_page(request: Request):
    return _page(request, "tracking.html")


@router.get("/admin", response_class=HTMLResponse)
@router.get("/admin.html", response_class=HTMLResponse)
def admin_page(request: Request):
    return _page(request, "admin.html")
