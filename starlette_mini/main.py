"""Демо-приложение FastAPI с включенной минификацией HTML."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, StreamingResponse

from starlette_mini.core.config import settings
from starlette_mini.middleware.minify import HTMLMinifyMiddleware
from starlette_mini.utils.logger import logger

DEMO_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>  starlette-mini  </title>
    <style>
      body {
        margin: 0px;
        color: #ffffff;
      }
    </style>
  </head>
  <body>
    <!-- navigation -->
    <h1>   Hello World!   </h1>
    <p class="lead" >  Minified on the way out.  </p>
    <script>
      const greeting = "hello";
      console.log(greeting);
    </script>
  </body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Логирование старта и остановки приложения."""
    logger.info(f"{settings.APP_NAME} demo application started")
    yield
    logger.info(f"{settings.APP_NAME} demo application stopped")


app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    description="HTML minification middleware demo",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(HTMLMinifyMiddleware)


@app.get("/", response_class=HTMLResponse, tags=["pages"])
async def hello():
    return "<h1>Hello World!</h1>"


@app.get("/page", response_class=HTMLResponse, tags=["pages"])
async def page():
    """Страница с комментариями, пробелами, CSS и JS."""
    return DEMO_PAGE


@app.get("/stream", tags=["pages"])
async def stream():
    """HTML, отдаваемый несколькими чанками."""

    async def chunks() -> AsyncIterator[bytes]:
        for line in DEMO_PAGE.splitlines(keepends=True):
            yield line.encode("utf-8")

    return StreamingResponse(chunks(), media_type="text/html")


@app.get("/api/health", tags=["health"])
async def health():
    return {"status": "healthy", "app": settings.APP_NAME}
