"""Quote request and response models."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from jupiter_swap_api_client.route_plan_with_metadata import RoutePlanWithMetadata
from jupiter_swap_api_client.serde_helpers import (
    U64,
    CommaSeparated,
    PubkeyField,
    WireModel,
    flatten_query,
    split_commas,
)


class SwapMode(str, Enum):
    """Whether ``amount`` is the exact input or the exact output."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class QuoteRequest(WireModel):
    """Parameters for ``GET /quote``.

    Every optional field left as ``None`` is omitted from the query string
    and the service applies its own default.
    """

    input_mint: PubkeyField
    output_mint: PubkeyField
    amount: U64
    swap_mode: Optional[SwapMode] = None
    slippage_bps: int = Field(..., ge=0, le=10_000, description="Allowed slippage in basis points")
    auto_slippage: Optional[bool] = None
    max_auto_slippage_bps: Optional[int] = None
    compute_auto_slippage: Optional[bool] = None
    auto_slippage_collision_usd_value: Optional[int] = None
    minimize_slippage: Optional[bool] = None
    platform_fee_bps: Optional[int] = Field(default=None, ge=0, le=255)
    dexes: Optional[CommaSeparated] = None
    excluded_dexes: Optional[CommaSeparated] = None
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    restrict_intermediate_tokens: Optional[bool] = None
    max_accounts: Optional[int] = None
    quote_type: Optional[str] = None
    quote_args: Optional[dict[str, str]] = Field(
        default=None, description="Extra query parameters passed through as-is"
    )
    prefer_liquid_dexes: Optional[bool] = None

    @field_validator("dexes", "excluded_dexes", mode="before")
    @classmethod
    def _empty_dex_list_is_absent(cls, value):
        if value is not None and not split_commas(value):
            return None
        return value

    def to_query_params(self) -> list[tuple[str, str]]:
        """Serialize to ordered query-string pairs.

        ``quote_args`` entries are flattened into top-level keys.
        """
        data = self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"quote_args"}
        )
        params = list(flatten_query(data))
        if self.quote_args:
            params.extend(flatten_query(self.quote_args))
        return params


class PlatformFee(WireModel):
    """Platform fee charged on the output side of a quote."""

    amount: U64
    fee_bps: int


class QuoteResponse(WireModel):
    """Response from ``GET /quote``.

    Dumping with ``to_wire()`` yields the same field names the service sent,
    so a quote can be passed back verbatim inside a swap request.
    """

    input_mint: PubkeyField
    in_amount: U64
    output_mint: PubkeyField
    out_amount: U64
    other_amount_threshold: U64
    swap_mode: SwapMode
    slippage_bps: int
    computed_auto_slippage: Optional[int] = None
    uses_quote_minimizing_slippage: Optional[bool] = None
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: Decimal
    route_plan: RoutePlanWithMetadata
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None
