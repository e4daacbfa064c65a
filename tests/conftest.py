"""Shared fixtures for relay tests."""

import os
import sys

import pytest

# Ensure the project root is on sys.path so `from services.X import Y` works
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture()
def plain_backend_payload():
    """A backend reply with only text."""
    return {"body": "hi", "tx_array": None, "structured_data": None}


@pytest.fixture()
def rich_backend_payload():
    """A backend reply with one transaction and structured data."""
    return {
        "body": "done",
        "tx_array": [
            {
                "chain_id": 1,
                "to_address": "0xabc",
                "input_bytes": "0x",
                "description": "transfer",
                "description_short": "tx",
            }
        ],
        "structured_data": {"ok": True},
    }


@pytest.fixture()
def multi_tx_payload():
    """Three transactions on different chains, the middle one undescribed."""
    return {
        "body": "Prepared 3 transactions",
        "tx_array": [
            {
                "chain_id": 1,
                "to_address": "0x1111111111111111111111111111111111111111",
                "input_bytes": "0xa9059cbb",
                "description": "Approve USDC",
                "description_short": "approve",
            },
            {
                "chain_id": 8453,
                "to_address": "0x2222222222222222222222222222222222222222",
                "input_bytes": "0x095ea7b3",
                "description": None,
                "description_short": None,
            },
            {
                "chain_id": 42161,
                "to_address": "0x3333333333333333333333333333333333333333",
                "input_bytes": "0x",
                "description": "Bridge to Arbitrum",
                "description_short": "bridge",
            },
        ],
        "structured_data": None,
    }
