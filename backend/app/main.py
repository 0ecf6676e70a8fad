# app/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.routers.auth import router as auth_router
from app.routers.users import router as users_router
from app.routers.profile import router as profile_router
from app.routers.exercises import router as exercises_router
from app.routers.logs import router as logs_router
from app.routers.recommendations import router as recommendations_router
from app.routers.programs import router as programs_router
from app.routers.achievements import router as achievements_router
from app.db import SessionLocal  # for healthz DB check
from app.settings import get_settings

settings = get_settings()

# app.* loggers (engine, services) propagate to the root handler
logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")
log = logging.getLogger("uvicorn")

app = FastAPI(
    title="Coaching API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "users", "description": "User administration"},
        {"name": "profile", "description": "Client body weight, experience and schedule"},
        {"name": "exercises", "description": "Exercise library"},
        {"name": "logs", "description": "Logged sessions, records and milestones"},
        {"name": "recommendations", "description": "Next-session load suggestions"},
        {"name": "programs", "description": "Periodized training plans"},
        {"name": "achievements", "description": "Personal records, streaks and milestones"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.ALLOW_ORIGINS.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "Coaching API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        log.warning("healthz: database check failed: %s", e)
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(users_router)
app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(exercises_router)
app.include_router(recommendations_router)
app.include_router(logs_router)
app.include_router(programs_router)
app.include_router(achievements_router)
