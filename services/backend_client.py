import httpx

from errors import BackendError, TransportError
from models.schemas import ChatMessageInput, ChatMessageOutput


class BackendClient:
    """Async HTTP client for the query backend.

    One POST per query to the configured URL. Failures surface as
    TransportError (network, decode) or BackendError (non-2xx status).
    """

    def __init__(self, target_url: str, client: httpx.AsyncClient | None = None):
        self.target_url = target_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def forward_query(self, query: str) -> ChatMessageOutput:
        payload = ChatMessageInput(body=query).model_dump()
        try:
            res = await self._client.post(self.target_url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to backend failed: {e}") from e

        if not 200 <= res.status_code < 300:
            raise BackendError(res.status_code, res.text)

        try:
            return ChatMessageOutput.model_validate(res.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise TransportError(f"Could not decode backend response: {e}") from e

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()
