from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.airplane import AirplaneCreate
from app.services.airplanes import (
    AirplaneNotFound,
    AirplaneValidationError,
    create_airplane,
    get_airplane,
    list_airplanes,
    new_airplane,
)
from app.web.context import ctx as _ctx
from app.web.deps import flash, require_csrf

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def render(request: Request, template_name: str, status_code: int = 200, **extra):
    return templates.TemplateResponse(
        request, template_name, _ctx(request, **extra), status_code=status_code
    )


@router.get("/")
def home():
    return RedirectResponse(url="/airplanes", status_code=303)


# ----------------- Airplanes -----------------

@router.get("/airplanes", response_class=HTMLResponse)
def airplanes_index(request: Request, db: Session = Depends(get_db)):
    return render(
        request,
        "airplanes/index.html",
        title="Airplanes",
        airplanes=list_airplanes(db),
    )


@router.get("/airplanes/new", response_class=HTMLResponse)
def airplanes_new(request: Request):
    return render(
        request,
        "airplanes/new.html",
        title="New airplane",
        airplane=new_airplane(),
        errors=[],
    )


@router.post("/airplanes")
def airplanes_create(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    csrf_token: str = Form(""),
    db: Session = Depends(get_db),
):
    require_csrf(request, csrf_token)

    params = AirplaneCreate(name=name, description=description or None)
    try:
        airplane = create_airplane(db, params)
    except AirplaneValidationError as e:
        # re-render with what was typed, plus the reasons
        return render(
            request,
            "airplanes/new.html",
            title="New airplane",
            airplane=params,
            errors=e.errors,
        )

    flash(request, "Airplane was successfully created.", "success")
    return RedirectResponse(url=f"/airplanes/{airplane.id}", status_code=303)


@router.get("/airplanes/{airplane_id}", response_class=HTMLResponse)
def airplanes_show(airplane_id: int, request: Request, db: Session = Depends(get_db)):
    try:
        airplane = get_airplane(db, airplane_id)
    except AirplaneNotFound:
        raise HTTPException(status_code=404, detail="Airplane not found")
    return render(
        request,
        "airplanes/show.html",
        title=airplane.name,
        airplane=airplane,
    )
