import os

DEFAULT_CORS_ALLOW_ORIGINS = "http://localhost:4200"


def cors_allow_origins() -> list[str]:
    """Origins allowed by CORS, from the comma-separated CORS_ALLOW_ORIGINS variable."""
    raw = os.getenv("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ALLOW_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
