"""Tests for the swap-instructions wire to domain conversion."""

import base64

import pytest
from solders.instruction import Instruction
from solders.pubkey import Pubkey

from jupiter_swap_api_client.swap import (
    InstructionInternal,
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    instruction_from_internal,
)


def assert_instruction_matches(instruction: Instruction, raw: dict):
    """Check a decoded instruction against its wire source."""
    assert str(instruction.program_id) == raw["programId"]
    assert bytes(instruction.data) == base64.b64decode(raw["data"])
    assert len(instruction.accounts) == len(raw["accounts"])
    for meta, raw_meta in zip(instruction.accounts, raw["accounts"]):
        assert meta.pubkey == Pubkey.from_string(raw_meta["pubkey"])
        assert meta.is_signer == raw_meta["isSigner"]
        assert meta.is_writable == raw_meta["isWritable"]


class TestSwapInstructionsConversion:
    """Tests for SwapInstructionsResponse.from_internal."""

    def test_every_field_converted(self, swap_instructions_json):
        internal = SwapInstructionsResponseInternal.model_validate(swap_instructions_json)

        response = SwapInstructionsResponse.from_internal(internal)

        assert response.token_ledger_instruction is None
        assert len(response.compute_budget_instructions) == 2
        for ix, raw in zip(
            response.compute_budget_instructions,
            swap_instructions_json["computeBudgetInstructions"],
        ):
            assert_instruction_matches(ix, raw)
        assert len(response.setup_instructions) == 1
        assert_instruction_matches(
            response.setup_instructions[0], swap_instructions_json["setupInstructions"][0]
        )
        assert_instruction_matches(
            response.swap_instruction, swap_instructions_json["swapInstruction"]
        )
        assert_instruction_matches(
            response.cleanup_instruction, swap_instructions_json["cleanupInstruction"]
        )
        assert response.other_instructions == ()
        assert [str(a) for a in response.address_lookup_table_addresses] == (
            swap_instructions_json["addressLookupTableAddresses"]
        )
        assert response.prioritization_fee_lamports == 5000
        assert response.compute_unit_limit == 200000
        assert response.prioritization_type.compute_budget.micro_lamports == 25000
        assert response.prioritization_type.compute_budget.estimated_micro_lamports == 20000
        assert response.dynamic_slippage_report is None
        assert response.simulation_error is None

    def test_account_order_preserved(self, swap_instructions_json, user_pubkey):
        internal = SwapInstructionsResponseInternal.model_validate(swap_instructions_json)

        response = SwapInstructionsResponse.from_internal(internal)

        accounts = response.swap_instruction.accounts
        assert accounts[1].pubkey == Pubkey.from_string(user_pubkey)
        assert accounts[1].is_signer is True
        assert [str(meta.pubkey) for meta in accounts] == [
            raw["pubkey"] for raw in swap_instructions_json["swapInstruction"]["accounts"]
        ]

    def test_optional_lists_default_empty(self, swap_instructions_json):
        for key in ("computeBudgetInstructions", "setupInstructions", "otherInstructions"):
            del swap_instructions_json[key]

        response = SwapInstructionsResponse.from_internal(
            SwapInstructionsResponseInternal.model_validate(swap_instructions_json)
        )

        assert response.compute_budget_instructions == ()
        assert response.setup_instructions == ()
        assert response.other_instructions == ()

    def test_missing_fee_fields_are_none(self, swap_instructions_json):
        del swap_instructions_json["prioritizationFeeLamports"]
        del swap_instructions_json["computeUnitLimit"]

        response = SwapInstructionsResponse.from_internal(
            SwapInstructionsResponseInternal.model_validate(swap_instructions_json)
        )

        assert response.prioritization_fee_lamports is None
        assert response.compute_unit_limit is None

    def test_response_is_frozen(self, swap_instructions_json):
        response = SwapInstructionsResponse.from_internal(
            SwapInstructionsResponseInternal.model_validate(swap_instructions_json)
        )

        with pytest.raises(AttributeError):
            response.compute_unit_limit = 1

    def test_malformed_account_pubkey_fails(self, swap_instructions_json):
        """A bad account key raises instead of being dropped."""
        swap_instructions_json["swapInstruction"]["accounts"][2]["pubkey"] = "0OIl-not-base58"
        internal = SwapInstructionsResponseInternal.model_validate(swap_instructions_json)

        with pytest.raises(ValueError):
            SwapInstructionsResponse.from_internal(internal)

    def test_malformed_lookup_table_fails(self, swap_instructions_json):
        swap_instructions_json["addressLookupTableAddresses"].append("short")
        internal = SwapInstructionsResponseInternal.model_validate(swap_instructions_json)

        with pytest.raises(ValueError):
            SwapInstructionsResponse.from_internal(internal)

    def test_malformed_data_fails(self):
        internal = InstructionInternal.model_validate(
            {"programId": "11111111111111111111111111111111", "accounts": [], "data": "@@@"}
        )

        with pytest.raises(ValueError, match="Invalid instruction data"):
            instruction_from_internal(internal)
