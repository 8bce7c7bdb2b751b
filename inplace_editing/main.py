import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from inplace_editing import __version__
from inplace_editing.core.container import ApplicationContainer, get_container
from inplace_editing.db.models import Category, Post
from inplace_editing.infrastructure.database import dispose_engine, init_db
from inplace_editing.interfaces.http.routers import posts as posts_router
from inplace_editing.interfaces.http.routers.in_place import InPlaceEditRouter
from inplace_editing.modules.editing import RecordNotFoundError
from inplace_editing.web import install_helpers

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (BASE_DIR / path).resolve()


def build_editing_router(container: ApplicationContainer) -> InPlaceEditRouter:
    """Declare the demo blog's editable fields."""
    registry = container.registry
    registry.register(Post)
    registry.register(Category)

    editing = InPlaceEditRouter(
        registry,
        protection=container.protection,
        fallback_error_message=container.settings.editor.fallback_error_message,
    )
    editing.in_place_edit_for("post", "title")
    editing.in_place_edit_for("post", "body", empty_text="(no body)")
    editing.in_place_edit_for("post", "view_limit")
    editing.in_place_edit_for_foreign_key("post", "category_id", "category", "name")
    editing.in_place_edit_for("category", "name")
    return editing


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await dispose_engine()


async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> PlainTextResponse:
    logger.info("Lookup failed for %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=404)


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    container = container or get_container()
    settings = container.settings
    logging.getLogger("inplace_editing").setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.project_name,
        description="In-place editing for server-rendered pages",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    templates = Jinja2Templates(directory=str(_resolve_path(settings.template_dir)))
    install_helpers(templates, container.protection, settings.editor)
    app.state.templates = templates

    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)

    editing = build_editing_router(container)
    app.state.editing = editing
    app.include_router(editing.build(), prefix=settings.editor.route_prefix, tags=["in-place editing"])
    app.include_router(posts_router.router, tags=["posts"])

    return app


app = create_app()
