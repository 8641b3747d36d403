from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api import routes
from core.config import settings
from core.logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="ISPW Generate",
    description="Triggers an ISPW generate through CES and waits for its status.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)
