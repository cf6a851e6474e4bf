from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.account import router as account_router
from api.errors import register_error_handlers
from config import settings
from logging_config import configure_logging
from utils.responses import SnakeCaseJSONResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Registration API with snake_case JSON bodies",
    version="0.1.0",
    lifespan=lifespan,
    default_response_class=SnakeCaseJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(account_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
