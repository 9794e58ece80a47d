"""Async client for the Jupiter swap API.

Operations:
- quote: GET /quote
- swap: POST /swap
- swap_instructions: POST /swap-instructions
"""

from jupiter_swap_api_client.client import JupiterSwapApiClient
from jupiter_swap_api_client.errors import RequestError
from jupiter_swap_api_client.quote import PlatformFee, QuoteRequest, QuoteResponse, SwapMode
from jupiter_swap_api_client.route_plan_with_metadata import (
    RoutePlanStep,
    RoutePlanWithMetadata,
    SwapInfo,
)
from jupiter_swap_api_client.swap import (
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
)
from jupiter_swap_api_client.transaction_config import (
    AutoMultiplier,
    DynamicSlippageSettings,
    JitoTipLamports,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    PriorityLevelWithMaxLamportsConfig,
    TransactionConfig,
)

__all__ = [
    # Client
    "JupiterSwapApiClient",
    "RequestError",
    # Quote
    "QuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "SwapMode",
    "RoutePlanStep",
    "RoutePlanWithMetadata",
    "SwapInfo",
    # Swap
    "SwapRequest",
    "SwapResponse",
    "SwapInstructionsResponse",
    "SwapInstructionsResponseInternal",
    # Transaction config
    "TransactionConfig",
    "AutoMultiplier",
    "JitoTipLamports",
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "PriorityLevelWithMaxLamportsConfig",
    "DynamicSlippageSettings",
]
