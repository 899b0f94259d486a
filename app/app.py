import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.html.story import RevelationPage
from domain.catalog import load_catalog
from domain.errors import GenerationError, ValidationError
from domain.formatting import year_label
from domain.llm_service import LLMService
from domain.past_life import resolve
from domain.services import request_narrative, require, reveal_past_life


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def templates(request: Request) -> Environment:
    return request.app.state.templates


@aHTMLResponse
async def homepage(request: Request) -> str:
    return templates(request).get_template("index.html").render()


@aHTMLResponse
async def reveal(request: Request) -> str | tuple[str, int]:
    async with request.form() as form:
        name = str(form.get("name", ""))

    try:
        revelation = await reveal_past_life(
            name,
            catalog=request.app.state.catalog,
            llm=request.app.state.llm,
            labels=request.app.state.config.year_labels,
        )
    except ValidationError:
        html = templates(request).get_template("index.html").render(
            error="이름을 입력해 주세요.", name=name
        )
        return html, 400

    return RevelationPage(revelation, environment=templates(request)).render()


async def api_story(request: Request) -> JSONResponse:
    try:
        data = await request.json()
    except ValueError:
        return JSONResponse({"error": "Body must be JSON."}, status_code=400)
    if not isinstance(data, dict):
        return JSONResponse({"error": "Body must be a JSON object."}, status_code=400)

    name, title, year = data.get("name"), data.get("title"), data.get("year")
    try:
        require(name, "Name")
        require(title, "Title")
    except ValidationError:
        return JSONResponse({"error": "Name and title are required"}, status_code=400)
    if not isinstance(year, int) or isinstance(year, bool):
        return JSONResponse({"error": "Year must be an integer."}, status_code=400)

    try:
        story = await request_narrative(
            name,
            title,
            year,
            llm=request.app.state.llm,
            labels=request.app.state.config.year_labels,
        )
    except GenerationError:
        logger.exception("Story generation failed")
        return JSONResponse({"error": "Failed to generate story"}, status_code=500)

    return JSONResponse({"story": story})


async def api_past_life(request: Request) -> JSONResponse:
    name = request.query_params.get("name", "")
    if not name.strip():
        return JSONResponse({"error": "Name is required"}, status_code=400)

    past_life = resolve(name, request.app.state.catalog)
    return JSONResponse(
        {
            "name": name,
            **past_life.to_dict(),
            "year_label": year_label(
                past_life.year, request.app.state.config.year_labels
            ),
        }
    )


def create_app(
    cfg: config.Config | None = None,
    *,
    llm: LLMService | None = None,
    catalog: Sequence[str] | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        # ConfigurationError here stops the server from starting.
        app.state.catalog = (
            load_catalog(cfg.catalog_path) if catalog is None else catalog
        )
        yield
        await app.state.llm.close()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/reveal", reveal, methods=["POST"]),
            Route("/api/story", api_story, methods=["POST"]),
            Route("/api/past-life", api_past_life, methods=["GET"]),
            Mount("/assets", StaticFiles(directory=cfg.assets_dir), name="assets"),
        ],
        lifespan=lifespan,
    )

    app.state.config = cfg
    app.state.templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    app.state.llm = (
        LLMService(
            api_key=cfg.openai_api_key,
            model=cfg.story_model,
            max_tokens=cfg.story_max_tokens,
            temperature=cfg.story_temperature,
            timeout=cfg.llm_timeout,
        )
        if llm is None
        else llm
    )
    return app


CONFIG = config.Config()
configure_logging(CONFIG.log_level)

app = create_app(CONFIG)
