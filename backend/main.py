import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from routers import lesson
from services.claude import CompletionClient

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = None
    if settings.ANTHROPIC_API_KEY:
        client = CompletionClient.from_settings(settings)
        logger.info("Completion client ready (model=%s)", client.model)
    app.state.completion_client = client
    yield
    if client is not None:
        await client.close()


app = FastAPI(title="Lesson Quiz Tutor", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lesson.router)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Answer invalid lesson bodies with the endpoint's own result shape."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    message = "; ".join(messages) or "Invalid request"

    path = request.url.path
    if path in lesson.RESULT_FIELDS:
        return lesson.error_response(path, 422, message)
    return JSONResponse(status_code=422, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    """Non-POST requests to a lesson endpoint get that endpoint's result shape."""
    path = request.url.path
    if exc.status_code == 405 and path in lesson.RESULT_FIELDS:
        return lesson.error_response(path, 405, "Method Not Allowed", headers=exc.headers)
    return await http_exception_handler(request, exc)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
