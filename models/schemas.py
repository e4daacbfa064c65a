from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt


class ChatMessageInput(BaseModel):
    """Request body sent to the backend."""

    body: str
    api_key: Optional[str] = None


class RawTxInput(BaseModel):
    chain_id: StrictInt = Field(ge=-(2**63), lt=2**63)
    to_address: str
    input_bytes: str
    description: Optional[str] = None
    description_short: Optional[str] = None  # reserved, never rendered


class ChatMessageOutput(BaseModel):
    """Response body returned by the backend."""

    body: str
    tx_array: Optional[list[RawTxInput]] = None
    structured_data: Optional[Any] = None


class ColorTag(str, Enum):
    SUCCESS = "success"
    INFO = "info"


class Attachment(BaseModel):
    title: str
    body: str
    color: ColorTag


class ChatMessage(BaseModel):
    """A rendered reply: primary text plus ordered attachments."""

    text: str
    attachments: list[Attachment] = []
