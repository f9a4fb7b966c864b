from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.berichte_auswertung import router as auswertung_router
from app.config import settings as app_settings
from app.models.base import build_engine, build_session_factory, get_db
from app.schemas import (
    BuchungCreate,
    BuchungUpdate,
    EinstellungWert,
    FreelancerCreate,
    FreelancerUpdate,
    KautionCreate,
    TerminCreate,
)
from app.services import config_store, kassenbuch, stammdaten
from app.services.db_init import init_db
from app.services.errors import StudioKasseFehler
from app.services.settlement import create_termin, delete_termin

logger = logging.getLogger("studio_kasse")

OK = {"success": True}


def _configure_logging() -> None:
    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ------------------------------------------------------------------------------
# App / Lifespan
# ------------------------------------------------------------------------------
def create_app(database_url: Optional[str] = None, static_dir: Optional[str] = None) -> FastAPI:
    _configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(database_url)
        init_db(engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info("%s %s bereit", app_settings.APP_NAME, app_settings.APP_VERSION)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title=app_settings.APP_NAME, version=app_settings.APP_VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    _register_routes(app)
    app.include_router(auswertung_router)

    # Frontend zuletzt, damit /api/* Vorrang hat
    static_path = Path(static_dir or app_settings.STATIC_DIR)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
    return app


# ------------------------------------------------------------------------------
# Fehler -> {"error": ...}
# ------------------------------------------------------------------------------
def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StudioKasseFehler)
    async def fachlicher_fehler(request: Request, exc: StudioKasseFehler) -> JSONResponse:
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validierungsfehler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = []
        for err in exc.errors():
            loc = ".".join(str(item) for item in err.get("loc", []) if item != "body")
            details.append({"field": loc or "body", "message": err.get("msg", "validation error")})
        return JSONResponse(
            {"error": "Ungültige Anfrage", "details": details},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(SQLAlchemyError)
    async def datenbankfehler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Datenbankfehler bei %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unerwarteter_fehler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unbehandelter Fehler bei %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# ------------------------------------------------------------------------------
# API
# ------------------------------------------------------------------------------
def _register_routes(app: FastAPI) -> None:

    @app.get("/api/health")
    def health():
        return {"ok": True, "version": app_settings.APP_VERSION}

    # Freelancer
    @app.get("/api/freelancers")
    def freelancers(db: Session = Depends(get_db)):
        return stammdaten.list_freelancers(db)

    @app.post("/api/freelancers")
    def freelancer_new(payload: FreelancerCreate, db: Session = Depends(get_db)):
        return stammdaten.create_freelancer(db, payload)

    @app.put("/api/freelancers/{fid}")
    def freelancer_edit(fid: int, payload: FreelancerUpdate, db: Session = Depends(get_db)):
        return stammdaten.update_freelancer(db, fid, payload)

    @app.delete("/api/freelancers/{fid}")
    def freelancer_delete(fid: int, db: Session = Depends(get_db)):
        stammdaten.delete_freelancer(db, fid)
        return OK

    # Kautionen
    @app.get("/api/kautionen")
    def kautionen(db: Session = Depends(get_db)):
        return stammdaten.list_kautionen(db)

    @app.get("/api/kautionen/freelancer/{fid}")
    def kautionen_freelancer(fid: int, db: Session = Depends(get_db)):
        return stammdaten.list_kautionen_freelancer(db, fid)

    @app.post("/api/kautionen")
    def kaution_new(payload: KautionCreate, db: Session = Depends(get_db)):
        return stammdaten.create_kaution(db, payload)

    @app.delete("/api/kautionen/{kid}")
    def kaution_delete(kid: int, db: Session = Depends(get_db)):
        stammdaten.delete_kaution(db, kid)
        return OK

    # Termine
    @app.get("/api/termine")
    def termine(db: Session = Depends(get_db)):
        return stammdaten.list_termine(db)

    @app.get("/api/termine/freelancer/{fid}")
    def termine_freelancer(fid: int, db: Session = Depends(get_db)):
        return stammdaten.list_termine_freelancer(db, fid)

    @app.post("/api/termine")
    def termin_new(payload: TerminCreate, db: Session = Depends(get_db)):
        return create_termin(db, payload).to_dict()

    @app.delete("/api/termine/{tid}")
    def termin_delete(tid: int, db: Session = Depends(get_db)):
        delete_termin(db, tid)
        return OK

    # Kassenbuch
    @app.get("/api/buchungen")
    def buchungen(db: Session = Depends(get_db)):
        return kassenbuch.list_buchungen(db)

    @app.post("/api/buchungen")
    def buchung_new(payload: BuchungCreate, db: Session = Depends(get_db)):
        return kassenbuch.create_buchung(db, payload)

    @app.put("/api/buchungen/{bid}")
    def buchung_edit(bid: int, payload: BuchungUpdate, db: Session = Depends(get_db)):
        return kassenbuch.update_buchung(db, bid, payload)

    @app.delete("/api/buchungen/{bid}")
    def buchung_delete(bid: int, db: Session = Depends(get_db)):
        kassenbuch.delete_buchung(db, bid)
        return OK

    # Einstellungen
    @app.get("/api/einstellungen/{key}")
    def einstellung(key: str, db: Session = Depends(get_db)):
        return {"value": config_store.load_value(db, key)}

    @app.post("/api/einstellungen/{key}")
    def einstellung_save(key: str, payload: EinstellungWert, db: Session = Depends(get_db)):
        config_store.save_value(db, key, payload.value)
        return OK


app = create_app()

# ------------------------------------------------------------------------------
# Dev-Server
# ------------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=app_settings.HOST, port=app_settings.PORT, reload=True)
