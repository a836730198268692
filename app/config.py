import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    CONTACT_FORM_BASE_URL: str = "http://localhost:8080"
    HEALTH_URL: str = f"{CONTACT_FORM_BASE_URL}/health"
    TOKEN_URL: str = f"{CONTACT_FORM_BASE_URL}/form-token.js"
    CONTACT_URL: str = f"{CONTACT_FORM_BASE_URL}/f/contact"
    CORS_ORIGIN: str = "https://connexxo.com"
    # Shown on the page for humans; the probes go through localhost.
    PUBLIC_SERVICE_URLS: tuple[str, ...] = (
        "http://contact.connexxo.com:8080/health",
        "http://contact.connexxo.com:8080/form-token.js",
        "http://contact.connexxo.com:8080/f/contact",
    )
    PROBE_TIMEOUT_S: float = 5
    PROBE_CONNECT_TIMEOUT_S: float = 3
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
