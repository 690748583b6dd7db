"""EEKit API: FastAPI application entry point."""

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eekit import __version__
from eekit_server.routes import converters, electrical, electronics, resistor, solar

load_dotenv()


app = FastAPI(
    title="EEKit API",
    description="Electrical and electronics engineering calculators",
    version=__version__,
)

# CORS: allow frontend origins
_frontend_url = os.getenv("FRONTEND_URL")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[_frontend_url] if _frontend_url else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route modules
app.include_router(electronics.router, prefix="/api", tags=["Electronics"])
app.include_router(electrical.router, prefix="/api", tags=["Electrical"])
app.include_router(solar.router, prefix="/api", tags=["Solar"])
app.include_router(resistor.router, prefix="/api", tags=["Resistor"])
app.include_router(converters.router, prefix="/api", tags=["Converters"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "eekit-api", "version": __version__}
