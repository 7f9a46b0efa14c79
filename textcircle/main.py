"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from textcircle.config import settings
from textcircle.engine.registry import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.textcircle_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="TextCircle",
        description="ASCII text circle validator — ring geometry and escape-path diagrams",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    load_transforms()

    from textcircle.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
