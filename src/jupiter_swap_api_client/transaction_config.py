"""Options controlling how the service builds a swap transaction.

Each option is a named field. Optional fields left as ``None`` are omitted
from the request body and the service falls back to its default.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import Field

from jupiter_swap_api_client.serde_helpers import U64, PubkeyField, WireModel


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class PriorityLevelWithMaxLamportsConfig(WireModel):
    priority_level: PriorityLevel
    max_lamports: int
    global_: bool = Field(default=False, alias="global")


class PriorityLevelWithMaxLamports(WireModel):
    """Let the service estimate the fee for a priority level, capped at max_lamports."""

    priority_level_with_max_lamports: PriorityLevelWithMaxLamportsConfig


class AutoMultiplier(WireModel):
    """Multiply the service's automatic fee estimate."""

    auto_multiplier: int


class JitoTipLamports(WireModel):
    """Pay a Jito tip instead of a compute budget priority fee."""

    jito_tip_lamports: int


PrioritizationFeeLamports = Union[
    Literal["auto"],
    int,
    AutoMultiplier,
    JitoTipLamports,
    PriorityLevelWithMaxLamports,
]

ComputeUnitPriceMicroLamports = Union[Literal["auto"], int]


class DynamicSlippageSettings(WireModel):
    min_bps: Optional[int] = None
    max_bps: Optional[int] = None


class KeyedUiAccount(WireModel):
    """An account the service should use instead of fetching it over RPC."""

    pubkey: str
    lamports: int
    data: list[str] = Field(..., description='Encoded data, e.g. ["<base64>", "base64"]')
    owner: str
    executable: bool = False
    rent_epoch: U64 = 0
    space: Optional[int] = None


class TransactionConfig(WireModel):
    """Swap transaction options, flattened into the swap request body."""

    wrap_and_unwrap_sol: bool = True
    allow_optimized_wrapped_sol_token_account: bool = False
    fee_account: Optional[PubkeyField] = None
    destination_token_account: Optional[PubkeyField] = None
    tracking_account: Optional[PubkeyField] = None
    compute_unit_price_micro_lamports: Optional[ComputeUnitPriceMicroLamports] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    dynamic_compute_unit_limit: bool = False
    as_legacy_transaction: bool = False
    use_shared_accounts: Optional[bool] = None
    use_token_ledger: bool = False
    skip_user_accounts_rpc_calls: bool = False
    keyed_ui_accounts: Optional[list[KeyedUiAccount]] = None
    program_authority_id: Optional[int] = Field(default=None, ge=0, le=255)
    dynamic_slippage: Optional[DynamicSlippageSettings] = None
    blockhash_slots_to_expiry: Optional[int] = Field(default=None, ge=0, le=255)
    correct_last_valid_block_height: bool = False
