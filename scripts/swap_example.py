#!/usr/bin/env python3
"""Quote a swap, then fetch its transaction and its instructions.

Usage:
    python scripts/swap_example.py --amount 1000000
    JUPITER_BASE_PATH=http://localhost:8080 python scripts/swap_example.py
"""

import argparse
import asyncio
import logging
import sys

from solders.pubkey import Pubkey

from jupiter_swap_api_client import (
    JupiterSwapApiClient,
    QuoteRequest,
    RequestError,
    SwapRequest,
    TransactionConfig,
)
from jupiter_swap_api_client.config import get_settings

logger = logging.getLogger(__name__)

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
NATIVE_MINT = "So11111111111111111111111111111111111111112"
TEST_WALLET = "2AQdpHJ2JpcEgPiATUXjQxA8QmafFegfQwSLWSprPicm"


async def run(amount: int, slippage_bps: int, user: str) -> int:
    settings = get_settings()
    client = JupiterSwapApiClient.from_settings(settings)
    proxy = settings.proxy_url

    quote_request = QuoteRequest(
        input_mint=USDC_MINT,
        output_mint=NATIVE_MINT,
        amount=amount,
        slippage_bps=slippage_bps,
    )

    try:
        quote = await client.quote(quote_request, proxy)
        labels = [step.swap_info.label or "unknown" for step in quote.route_plan]
        logger.info(f"Quote: {quote.in_amount} -> {quote.out_amount} via {', '.join(labels)}")

        swap_request = SwapRequest(
            user_public_key=Pubkey.from_string(user),
            quote_response=quote,
            config=TransactionConfig(dynamic_compute_unit_limit=True),
        )

        swap = await client.swap(swap_request, proxy)
        logger.info(
            f"Swap transaction: {len(swap.swap_transaction)} bytes, "
            f"last valid block height {swap.last_valid_block_height}"
        )

        instructions = await client.swap_instructions(swap_request, proxy)
        logger.info(
            f"Swap instructions: {len(instructions.setup_instructions)} setup, "
            f"swap program {instructions.swap_instruction.program_id}, "
            f"{len(instructions.address_lookup_table_addresses)} lookup tables"
        )
    except RequestError as e:
        logger.error(f"Swap API call failed: {e}")
        return 1

    return 0


def main():
    parser = argparse.ArgumentParser(description="Jupiter swap API example")
    parser.add_argument("--amount", type=int, default=1_000_000, help="USDC amount in base units")
    parser.add_argument("--slippage-bps", type=int, default=50, help="Slippage in basis points")
    parser.add_argument("--user", default=TEST_WALLET, help="Wallet public key")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Settings: {settings.get_safe_dict()}")

    sys.exit(asyncio.run(run(args.amount, args.slippage_bps, args.user)))


if __name__ == "__main__":
    main()
