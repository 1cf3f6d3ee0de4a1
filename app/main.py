#run it with uvicorn app.main:app --reload
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

from app.api.api_router import api_router
from app.core.config import Settings, get_settings

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Landing Page Contact API", version="1.0.0")

# CORS setup (set ALLOWED_ORIGINS to the landing page domains in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/api/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports whether email delivery is configured, never the values themselves.
    """
    return {
        "status": "ok",
        "env_vars": {
            "resend_api_key": settings.email_enabled,
            "admin_email": bool(settings.admin_recipients),
        },
    }
