import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from league_matcher.config import LOG_LEVEL, configure_logging
from league_matcher.routes import matchmaking

APP_NAME = "League Matcher API"

configure_logging(LOG_LEVEL)

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matchmaking.router, prefix="/api", tags=["matchmaking"])


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify the service is up"""
    return {"app_name": APP_NAME, "status": "healthy"}


def run():
    """Serve the API with uvicorn (league-matcher-api)"""
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
