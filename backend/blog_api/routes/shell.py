"""
Blog API Backend: Presentation Shell Routes
==============================================

What:  Server-rendered pages: a static header with greeting cards, and a home
       page that triggers a demo API fetch.
How:   Jinja2 templates (templates/) rendered through FastAPI's
       Jinja2Templates. Greeting data is hardcoded below.
Who:   Browsers. These pages never read from or write to the blog store.

Pages:
    GET /      header + one card per (name, age) pair in GREETINGS
    GET /home  static text; schedules DemoService.fetch_and_log as a
               background task, so the fetch runs after the page is sent
               and its result only reaches the log
"""

from pathlib import Path
from typing import List, NamedTuple

from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blog_api.services.demo_service import demo_service

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Shell"], include_in_schema=False)


class Greeting(NamedTuple):
    name: str
    age: int


HEADER_HEADING = "Skill Labs"
HEADER_TAGLINE = "MERN Stack"

GREETINGS: List[Greeting] = [
    Greeting(name="Vineeth", age=19),
    Greeting(name="Vishal Bhat", age=20),
    Greeting(name="Sreenivaas", age=20),
]


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Header plus the static greeting cards."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "heading": HEADER_HEADING,
            "tagline": HEADER_TAGLINE,
            "greetings": GREETINGS,
        },
    )


@router.get("/home", response_class=HTMLResponse)
async def home(request: Request, background_tasks: BackgroundTasks) -> HTMLResponse:
    """
    Static home page.

    The demo fetch is queued on the response's background tasks; its
    outcome (data or error) is logged by DemoService and never rendered.
    """
    background_tasks.add_task(demo_service.fetch_and_log)
    return templates.TemplateResponse(request, "home.html", {"heading": HEADER_HEADING})
