"""Swap request, swap response and swap-instructions models.

``/swap-instructions`` returns instructions with base58 strings and base64
data. Those are decoded into the ``InstructionInternal`` family first and
converted to solders types by ``SwapInstructionsResponse.from_internal``.
"""

import base64
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from pydantic import (
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from jupiter_swap_api_client.quote import QuoteResponse
from jupiter_swap_api_client.serde_helpers import (
    U64,
    Base64Payload,
    PubkeyField,
    WireModel,
    parse_pubkey,
)
from jupiter_swap_api_client.transaction_config import TransactionConfig


def _config_keys() -> set[str]:
    keys = set()
    for name, field in TransactionConfig.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


class SwapRequest(WireModel):
    """Body of ``POST /swap`` and ``POST /swap-instructions``.

    ``config`` is flattened into the top-level JSON object on the wire.
    """

    user_public_key: PubkeyField
    quote_response: QuoteResponse
    config: TransactionConfig = Field(default_factory=TransactionConfig)

    @model_validator(mode="before")
    @classmethod
    def _collect_config(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "config" in data:
            return data
        keys = _config_keys()
        collected = {k: v for k, v in data.items() if k not in keys}
        collected["config"] = {k: v for k, v in data.items() if k in keys}
        return collected

    @model_serializer(mode="wrap")
    def _flatten_config(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        config = data.pop("config", None)
        if isinstance(config, dict):
            data.update(config)
        return data


class JitoPrioritization(WireModel):
    lamports: U64


class ComputeBudgetPrioritization(WireModel):
    micro_lamports: U64
    estimated_micro_lamports: Optional[U64] = None


class PrioritizationType(WireModel):
    """How the prioritization fee was paid; exactly one key is set."""

    jito: Optional[JitoPrioritization] = None
    compute_budget: Optional[ComputeBudgetPrioritization] = None


class DynamicSlippageReport(WireModel):
    slippage_bps: Optional[int] = None
    other_amount: Optional[U64] = None
    simulated_incurred_slippage_bps: Optional[int] = None
    amplification_ratio: Optional[Decimal] = None
    category_name: Optional[str] = None
    heuristic_max_slippage_bps: Optional[int] = None


class UiSimulationError(WireModel):
    error_code: str
    error: str


class SwapResponse(WireModel):
    """Response from ``POST /swap``: a serialized, unsigned transaction."""

    swap_transaction: Base64Payload
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None


class AccountMetaInternal(WireModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class InstructionInternal(WireModel):
    program_id: str
    accounts: list[AccountMetaInternal]
    data: str


class SwapInstructionsResponseInternal(WireModel):
    """Literal wire shape of the ``POST /swap-instructions`` response."""

    token_ledger_instruction: Optional[InstructionInternal] = None
    compute_budget_instructions: list[InstructionInternal] = Field(default_factory=list)
    setup_instructions: list[InstructionInternal] = Field(default_factory=list)
    swap_instruction: InstructionInternal
    cleanup_instruction: Optional[InstructionInternal] = None
    other_instructions: list[InstructionInternal] = Field(default_factory=list)
    address_lookup_table_addresses: list[str] = Field(default_factory=list)
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None


def instruction_from_internal(instruction: InstructionInternal) -> Instruction:
    """Decode a wire instruction.

    Raises:
        ValueError: if a pubkey is not valid base58 or the data is not base64
    """
    accounts = [
        AccountMeta(parse_pubkey(account.pubkey), account.is_signer, account.is_writable)
        for account in instruction.accounts
    ]
    try:
        data = base64.b64decode(instruction.data, validate=True)
    except ValueError as e:
        raise ValueError(f"Invalid instruction data for {instruction.program_id}: {e}") from e
    return Instruction(parse_pubkey(instruction.program_id), data, accounts)


def _optional_instruction(instruction: Optional[InstructionInternal]) -> Optional[Instruction]:
    if instruction is None:
        return None
    return instruction_from_internal(instruction)


def _instructions(instructions: list[InstructionInternal]) -> tuple[Instruction, ...]:
    return tuple(instruction_from_internal(ix) for ix in instructions)


@dataclass(frozen=True)
class SwapInstructionsResponse:
    """Swap instructions with decoded pubkeys and instruction data."""

    token_ledger_instruction: Optional[Instruction]
    compute_budget_instructions: tuple[Instruction, ...]
    setup_instructions: tuple[Instruction, ...]
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction]
    other_instructions: tuple[Instruction, ...]
    address_lookup_table_addresses: tuple[Pubkey, ...]
    prioritization_fee_lamports: Optional[int]
    compute_unit_limit: Optional[int]
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None

    @classmethod
    def from_internal(cls, internal: SwapInstructionsResponseInternal) -> "SwapInstructionsResponse":
        """Convert the wire shape, field by field.

        Raises:
            ValueError: if any embedded pubkey or instruction data is malformed
        """
        return cls(
            token_ledger_instruction=_optional_instruction(internal.token_ledger_instruction),
            compute_budget_instructions=_instructions(internal.compute_budget_instructions),
            setup_instructions=_instructions(internal.setup_instructions),
            swap_instruction=instruction_from_internal(internal.swap_instruction),
            cleanup_instruction=_optional_instruction(internal.cleanup_instruction),
            other_instructions=_instructions(internal.other_instructions),
            address_lookup_table_addresses=tuple(
                parse_pubkey(address) for address in internal.address_lookup_table_addresses
            ),
            prioritization_fee_lamports=internal.prioritization_fee_lamports,
            compute_unit_limit=internal.compute_unit_limit,
            prioritization_type=internal.prioritization_type,
            dynamic_slippage_report=internal.dynamic_slippage_report,
            simulation_error=internal.simulation_error,
        )
