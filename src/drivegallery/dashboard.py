"""Drive Gallery web server.

FastAPI app that serves the gallery page (form + image grid), its static
assets and the /api/v1/ routers the page talks to.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from drivegallery import __version__, page_state
from drivegallery.api.v1 import mount_v1_routers
from drivegallery.config import get_settings

logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).parent / "frontend"
TEMPLATES_DIR = FRONTEND_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

app = FastAPI(
    title="Drive Gallery API",
    description="Browse the images of a public Google Drive folder tree.",
    version=__version__,
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
)

try:
    _custom_origins = get_settings().api_cors_allowed_origins
except Exception:
    logger.warning("Could not read CORS origins from settings", exc_info=True)
    _custom_origins = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=_custom_origins,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"
    # Drive image links redirect to googleusercontent.com.
    response.headers["Content-Security-Policy"] = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' 'unsafe-eval' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https://drive.google.com https://*.googleusercontent.com; "
        "connect-src 'self'; "
        "frame-ancestors 'none'"
    )
    if request.url.scheme == "https" or request.headers.get("x-forwarded-proto") == "https":
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response


app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")

mount_v1_routers(app)


def _static_version() -> str:
    """Cache-busting version string from the JS file mtimes."""
    js_dir = FRONTEND_DIR / "js"
    if not js_dir.exists():
        return "0"
    mtimes = [str(int(f.stat().st_mtime)) for f in sorted(js_dir.rglob("*.js"))]
    return hashlib.md5("|".join(mtimes).encode()).hexdigest()[:8]


@app.get("/")
async def index(request: Request):
    """Serve a fresh gallery page."""
    page_id, controller = page_state.create_page()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "page_id": page_id,
            "page": controller.snapshot(),
            "v": _static_version(),
            "app_version": __version__,
        },
    )


def run_dashboard(host: str = "127.0.0.1", port: int = 8000, dev: bool = False) -> None:
    """Run the web server."""
    print("\n" + "=" * 50)
    print("DRIVE GALLERY")
    print("=" * 50)
    if dev:
        print("Development mode: auto-reload enabled")
    print(f"\nOpen http://{'localhost' if host in ('127.0.0.1', '0.0.0.0') else host}:{port}\n")

    if dev:
        src_dir = str(Path(__file__).resolve().parent)
        uvicorn.run(
            "drivegallery.dashboard:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py", "*.html", "*.js", "*.css"],
            log_level="debug",
        )
    else:
        config = uvicorn.Config(app, host=host, port=port, log_config=None)
        uvicorn.Server(config).run()
