"""FastAPI application and startup wiring."""

import sys

import uvicorn
from fastapi import FastAPI

from telenotify.adapters.web import routes
from telenotify.config import AppConfig, __version__
from telenotify.launcher import create_notifier


def _log(msg: str):
    print(msg, file=sys.stderr)


app = FastAPI(title="Telegram Notifier", version=__version__)
app.include_router(routes.notify_router)


@app.get("/status")
async def status():
    current = routes.notifier
    return {
        "configured": current is not None,
        "receivers": len(current.receivers) if current else 0,
        "version": __version__,
    }


@app.on_event("startup")
async def startup_event():
    """Connect to Telegram when a bot token is configured."""
    config = AppConfig.from_env()
    if not config.telegram.is_configured:
        _log("Telegram not configured (set TELEGRAM_BOT_TOKEN in .env)")
        return
    try:
        routes.set_notifier(await create_notifier(config))
    except Exception as e:
        _log(f"Telegram notifier failed to start: {e}")


def main():
    config = AppConfig.from_env()
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
