import logging
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skill_bridge.api.routes import auth, generation, meta, profile, report, session
from skill_bridge.core.config import settings
from skill_bridge.services.generation import GenerationError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Skill Bridge API", version="0.1.0")

origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "X-Auth-Token",
        "X-Request-Id",
    ],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-Id") or uuid4().hex
    response = await call_next(request)
    response.headers["X-Request-Id"] = request_id
    return response


@app.exception_handler(GenerationError)
async def generation_error_handler(_: Request, exc: GenerationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _register_routes(prefix: str = "") -> None:
    app.include_router(auth.router, tags=["auth"], prefix=prefix)
    app.include_router(profile.router, tags=["profile"], prefix=prefix)
    app.include_router(generation.router, tags=["generation"], prefix=prefix)
    app.include_router(session.router, tags=["assessment"], prefix=prefix)
    app.include_router(report.router, tags=["report"], prefix=prefix)
    app.include_router(meta.router, tags=["meta"], prefix=prefix)


_register_routes("")
_register_routes("/api")
