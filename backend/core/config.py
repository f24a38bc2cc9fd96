import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    mongo_url: str = os.getenv("MONGO_URL", "mongodb://localhost/drinks")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")

    # Comma separated, "*" allows every origin
    cors_origins: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Detail routes answer 404 instead of a null payload when enabled
    strict_not_found: bool = os.getenv("STRICT_NOT_FOUND", "False").lower() == "true"

    # API docs metadata
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_description: str = os.getenv(
        "API_DESCRIPTION",
        "Read-only catalog of cocktail drinks and their ingredients"
    )
    api_homepage: str = os.getenv("API_HOMEPAGE", "https://drinks.wiki")


settings = Settings()
