# run_server.py
import threading
import time
import webbrowser

from app.config import settings as app_settings


def _open_browser_later(url: str, delay: float = 0.8):
    def _go():
        time.sleep(delay)
        webbrowser.open(url)
    threading.Thread(target=_go, daemon=True).start()


def main():
    import uvicorn
    host = app_settings.HOST
    port = app_settings.PORT

    # Lokal: Browser aufrufen, wenn Server gleich ready ist
    if not app_settings.is_production():
        _open_browser_later(f"http://{host}:{port}/")

    uvicorn.run("main:app", host=host, port=port, reload=False, log_level=app_settings.LOG_LEVEL)


if __name__ == "__main__":
    main()
