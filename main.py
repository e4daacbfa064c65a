import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from bot import RelayBot
from config import Settings, load_settings
from errors import ConfigError
from services.backend_client import BackendClient
from services.command_handler import CommandHandler

logger = logging.getLogger(__name__)

app = FastAPI(title="Discord Relay", description="Health probe for the Discord query relay")


@app.api_route("/health", methods=["GET", "HEAD", "POST"], response_class=PlainTextResponse)
async def health():
    return "OK"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Quiet noisy third-party loggers
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def build_health_server(settings: Settings) -> uvicorn.Server:
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None)
    return uvicorn.Server(config)


async def run(settings: Settings) -> int:
    """Run the Discord client and the health server until either one stops.

    Both listeners are expected to run forever, so whichever finishes first
    is an unexpected stop: the other is cancelled and a non-zero exit code
    is returned.
    """
    backend = BackendClient(settings.target_url)
    client = RelayBot(CommandHandler(backend))
    server = build_health_server(settings)

    logger.info("Starting health check server on port %s", settings.port)
    health_task = asyncio.create_task(server.serve(), name="health")
    logger.info("Starting Discord bot...")
    bot_task = asyncio.create_task(client.start(settings.discord_token), name="discord")

    try:
        done, pending = await asyncio.wait({bot_task, health_task}, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            if task.cancelled():
                logger.error("%s task was cancelled", task.get_name())
            elif task.exception() is not None:
                logger.error("%s task failed", task.get_name(), exc_info=task.exception())
            else:
                logger.error("%s task stopped unexpectedly", task.get_name())
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
    finally:
        if not client.is_closed():
            await client.close()
        await backend.aclose()
    return 1


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.log_level)
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
