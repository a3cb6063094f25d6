"""FastAPI application and startup."""

import asyncio
import logging

import uvicorn
from fastapi import FastAPI

from trakt_actions.adapters.web import action_routes
from trakt_actions.adapters.web.action_routes import action_router
from trakt_actions.config import CONFIG

log = logging.getLogger(__name__)

app = FastAPI(title="trakt actions")
app.include_router(action_router)


async def completion_event_loop():
    """Queue consumer — blocks until completion events arrive."""
    while True:
        event = await action_routes.completion_events.get()
        action_routes.recent_events.append(event)
        log.info(
            "%s completed success=%s", event.request.kind.value, event.success
        )


@app.on_event("startup")
async def startup_event():
    log.info("trakt actions server starting on port %s", CONFIG["port"])
    asyncio.create_task(completion_event_loop())


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=CONFIG["port"], log_level="info")


if __name__ == "__main__":
    main()
