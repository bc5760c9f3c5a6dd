from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.unitconvert.core.categories import Category, list_categories
from modules.unitconvert.tool.view import ViewState, resolve_view
from unithub.settings import shared_templates_dir

router = APIRouter()

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)
templates.env.auto_reload = True
templates.env.cache = {}


def _category_path(request: Request, name: str) -> str:
    return request.url_for(f"{name}_index").path


def _render_index(request: Request, view: ViewState) -> HTMLResponse:
    nav = [
        {
            "label": category.label,
            "href": _category_path(request, category.name),
            "active": category.name == view.active,
        }
        for category in list_categories()
    ]
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "nav": nav,
            "action": _category_path(request, view.active),
            "view": view,
        },
    )


def _register(category: Category) -> None:
    path = f"/{category.name}"

    @router.get(path, response_class=HTMLResponse, name=f"{category.name}_index")
    def index(
        request: Request,
        value: str | None = Query(None),
        from_unit: str | None = Query(None, alias="from"),
        to_unit: str | None = Query(None, alias="to"),
    ):
        fields = {"value": value, "from": from_unit, "to": to_unit}
        view = resolve_view(category, fields, submitted=False)
        return _render_index(request, view)

    @router.post(path, response_class=HTMLResponse, name=f"{category.name}_convert")
    def convert(
        request: Request,
        value: str | None = Form(None),
        from_unit: str | None = Form(None, alias="from"),
        to_unit: str | None = Form(None, alias="to"),
    ):
        fields = {"value": value, "from": from_unit, "to": to_unit}
        view = resolve_view(category, fields, submitted=True)
        return _render_index(request, view)


for _category in list_categories():
    _register(_category)
