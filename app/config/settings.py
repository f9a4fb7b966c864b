# studio_kasse/app/config/settings.py
import os

APP_NAME: str = "Studio-Kasse"
APP_VERSION: str = "1.0.0"

# production schaltet SSL fuer Postgres ein
APP_ENV: str = os.getenv("APP_ENV", "development").strip().lower()

# DB-URL (sqlite Datei liegt standardmaessig unter ./db/)
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./db/studio.db")

# Obergrenze fuer jeden DB-Aufruf (Sekunden)
DB_TIMEOUT_SECONDS: int = int(os.getenv("DB_TIMEOUT_SECONDS", "10"))

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "3000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info").strip().lower()

# Frontend (index.html etc.), wird nur gemountet wenn vorhanden
STATIC_DIR: str = os.getenv("STATIC_DIR", "public")

CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Fachliche Defaults
STUDIO_ANTEIL_QUOTE: str = os.getenv("STUDIO_ANTEIL_QUOTE", "0.30")
DEFAULT_FARBE: str = "#10b981"
UNBEKANNT_NAME: str = "Unbekannt"


def is_production() -> bool:
    return APP_ENV == "production"
