"""Route plan returned inside a quote.

A route plan is the ordered list of hops through liquidity venues that the
aggregator picked for a swap.
"""

from typing import Optional

from pydantic import Field

from jupiter_swap_api_client.serde_helpers import U64, PubkeyField, WireModel


class SwapInfo(WireModel):
    """A single swap through one AMM."""

    amm_key: PubkeyField
    label: Optional[str] = None
    input_mint: PubkeyField
    output_mint: PubkeyField
    in_amount: U64
    out_amount: U64
    fee_amount: U64
    fee_mint: PubkeyField


class RoutePlanStep(WireModel):
    """One hop of a route plan and the share of the input routed through it."""

    swap_info: SwapInfo
    percent: int = Field(ge=0, le=100)
    bps: Optional[int] = None


RoutePlanWithMetadata = list[RoutePlanStep]
