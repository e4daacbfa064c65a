"""Map a backend response onto a chat message with optional attachments.

Attachments are always appended in the same order: the transaction table
first (when there are transactions), then the structured data block.
"""

import json
import logging

from models.schemas import Attachment, ChatMessage, ChatMessageOutput, ColorTag, RawTxInput

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40
TRANSACTIONS_TITLE = "Transactions"
STRUCTURED_DATA_TITLE = "Additional Data"
STRUCTURED_DATA_PLACEHOLDER = "Unable to format structured data"


def render(resp: ChatMessageOutput) -> ChatMessage:
    """Render a backend response. Never raises for a valid ChatMessageOutput."""
    attachments = []

    if resp.tx_array:
        attachments.append(
            Attachment(
                title=TRANSACTIONS_TITLE,
                body=_format_transactions(resp.tx_array),
                color=ColorTag.SUCCESS,
            )
        )

    if resp.structured_data is not None:
        attachments.append(
            Attachment(
                title=STRUCTURED_DATA_TITLE,
                body=_format_structured_data(resp.structured_data),
                color=ColorTag.INFO,
            )
        )

    return ChatMessage(text=resp.body, attachments=attachments)


def _format_transactions(txs: list[RawTxInput]) -> str:
    lines = ["Transaction Details", SEPARATOR]
    for i, tx in enumerate(txs, start=1):
        lines.append(f"Transaction #{i}")
        lines.append(f"Chain ID: {tx.chain_id}")
        lines.append(f"To: {tx.to_address}")
        if tx.description is not None:
            lines.append(f"Description: {tx.description}")
        lines.append(SEPARATOR)
    return _fence("\n".join(lines))


def _format_structured_data(data) -> str:
    try:
        pretty = json.dumps(data, indent=2, ensure_ascii=False)
    except Exception as e:
        logger.warning("Could not pretty-print structured data: %s", e)
        return _fence(STRUCTURED_DATA_PLACEHOLDER)
    return _fence(pretty, lang="json")


def _fence(text: str, lang: str = "") -> str:
    return f"```{lang}\n{text}\n```"
