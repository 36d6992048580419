# app/web/context.py
from __future__ import annotations

from fastapi import Request

from app.core.config import settings
from app.web.deps import get_csrf_token, pop_flashes


def ctx(request: Request, **extra):
    """
    Shared template context: request, flashes, csrf_token, app_name.
    """
    context = {
        "request": request,
        "flashes": pop_flashes(request),
        "csrf_token": get_csrf_token(request),
        "app_name": settings.APP_NAME,
    }
    context.update(extra or {})
    return context
