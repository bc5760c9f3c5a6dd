from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from unithub.errors import InternalErrorMiddleware
from unithub.registry import MODULES_PATH, load_modules
from unithub.settings import APP_TITLE

logger = structlog.get_logger(__name__)

DEFAULT_HOME = "/length"


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def _prefix(mount: str) -> str:
    return "" if mount == "/" else mount


def _include_modules(app: FastAPI, modules: Dict[str, Dict[str, Any]]) -> str | None:
    home: str | None = None
    for meta in modules.values():
        if not meta.get("public", True):
            continue
        entrypoints = meta.get("entrypoints") or {}
        api_entry = entrypoints.get("api")
        if not api_entry:
            continue

        try:
            router = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError):
            logger.warning(
                "module.skipped",
                module=meta["name"],
                entrypoint=api_entry,
                exc_info=True,
            )
            continue

        prefix = _prefix(meta["mount"])
        app.include_router(router, prefix=prefix)
        if home is None and meta.get("home"):
            home = prefix + str(meta["home"])
    return home


def build_app(modules_path: Path = MODULES_PATH) -> FastAPI:
    app = FastAPI(title=APP_TITLE, docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(InternalErrorMiddleware)

    home = _include_modules(app, load_modules(modules_path)) or DEFAULT_HOME

    @app.get("/", include_in_schema=False)
    def root_redirect(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return RedirectResponse(url=base_path + home, status_code=302)

    return app
