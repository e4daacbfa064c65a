import logging

from errors import BackendError, TransportError
from models.schemas import ChatMessage
from services.backend_client import BackendClient
from services.renderer import render

logger = logging.getLogger(__name__)

ERROR_REPLY = "Sorry, there was an error processing your request."


class CommandHandler:
    """Turn a `/bot` query into the reply message.

    Backend failures never reach the user; they get a fixed apology and
    the details go to the log.
    """

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def respond(self, query: str | None) -> ChatMessage:
        query = query or ""
        logger.info("Forwarding query: %s", query)
        try:
            result = await self.backend.forward_query(query)
        except BackendError as e:
            logger.error("Backend error %s: %s", e.status_code, e.body)
            return ChatMessage(text=ERROR_REPLY)
        except TransportError as e:
            logger.error("Error forwarding query: %s", e)
            return ChatMessage(text=ERROR_REPLY)
        return render(result)
