"""Pytest configuration and fixtures."""

import base64
import os

import httpx
import pytest
from solders.pubkey import Pubkey

# Keep a developer's .env or environment from leaking into tests
for key in ("JUPITER_BASE_PATH", "JUPITER_PROXY_URL", "JUPITER_DEBUG"):
    os.environ.pop(key, None)

BASE_PATH = "https://quote-api.test/v6"

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
NATIVE_MINT = "So11111111111111111111111111111111111111112"
SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
COMPUTE_BUDGET_PROGRAM = "ComputeBudget111111111111111111111111111111"


def unique_pubkey() -> str:
    return str(Pubkey.new_unique())


@pytest.fixture
def quote_response_json() -> dict:
    """A /quote response with a single-hop route."""
    return {
        "inputMint": USDC_MINT,
        "inAmount": "1000000",
        "outputMint": NATIVE_MINT,
        "outAmount": "6546216",
        "otherAmountThreshold": "6513485",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": unique_pubkey(),
                    "label": "Whirlpool",
                    "inputMint": USDC_MINT,
                    "outputMint": NATIVE_MINT,
                    "inAmount": "1000000",
                    "outAmount": "6546216",
                    "feeAmount": "100",
                    "feeMint": USDC_MINT,
                },
                "percent": 100,
            }
        ],
        "contextSlot": 299283763,
        "timeTaken": 0.0123,
        "swapUsdValue": "1.00",
    }


def instruction_json(program_id: str, accounts: list[tuple[str, bool, bool]], data: bytes) -> dict:
    return {
        "programId": program_id,
        "accounts": [
            {"pubkey": pubkey, "isSigner": is_signer, "isWritable": is_writable}
            for pubkey, is_signer, is_writable in accounts
        ],
        "data": base64.b64encode(data).decode("ascii"),
    }


@pytest.fixture
def user_pubkey() -> str:
    return unique_pubkey()


@pytest.fixture
def swap_instructions_json(user_pubkey) -> dict:
    """A /swap-instructions response covering every instruction slot."""
    return {
        "tokenLedgerInstruction": None,
        "computeBudgetInstructions": [
            instruction_json(COMPUTE_BUDGET_PROGRAM, [], bytes([2, 0x40, 0x0D, 0x03, 0x00])),
            instruction_json(COMPUTE_BUDGET_PROGRAM, [], bytes([3, 1, 0, 0, 0, 0, 0, 0, 0])),
        ],
        "setupInstructions": [
            instruction_json(
                TOKEN_PROGRAM,
                [
                    (user_pubkey, True, True),
                    (unique_pubkey(), False, True),
                    (SYSTEM_PROGRAM, False, False),
                ],
                b"\x01",
            )
        ],
        "swapInstruction": instruction_json(
            "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4",
            [
                (TOKEN_PROGRAM, False, False),
                (user_pubkey, True, False),
                (unique_pubkey(), False, True),
                (unique_pubkey(), False, True),
            ],
            bytes(range(16)),
        ),
        "cleanupInstruction": instruction_json(
            TOKEN_PROGRAM, [(unique_pubkey(), False, True), (user_pubkey, True, True)], b"\x09"
        ),
        "otherInstructions": [],
        "addressLookupTableAddresses": [unique_pubkey(), unique_pubkey()],
        "prioritizationFeeLamports": 5000,
        "computeUnitLimit": 200000,
        "prioritizationType": {
            "computeBudget": {"microLamports": "25000", "estimatedMicroLamports": "20000"}
        },
        "dynamicSlippageReport": None,
        "simulationError": None,
    }


@pytest.fixture
def mock_http(monkeypatch):
    """Route every httpx.AsyncClient through an httpx.MockTransport.

    Call the fixture with a handler ``handler(request, proxy)``; it returns
    the list of keyword arguments each client was built with.
    """
    real_client = httpx.AsyncClient

    def install(handler):
        built = []

        def factory(*args, **kwargs):
            built.append(dict(kwargs))
            proxy = kwargs.pop("proxy", None)
            transport = httpx.MockTransport(lambda request: handler(request, proxy))
            return real_client(*args, transport=transport, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)
        return built

    return install
