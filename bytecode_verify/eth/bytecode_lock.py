"""
Creation bytecode comparison.

Compares locally compiled creation bytecode to the on-chain creation
transaction input. The comparison is exact: hex case differences count
as a mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass

from web3 import Web3


def keccak_hex(hex_code: str) -> str:
    """Keccak256 of a 0x-prefixed hex byte string, for log lines."""
    try:
        return Web3.to_hex(Web3.keccak(hexstr=hex_code))
    except ValueError:
        return "<not-hex>"


MATCH_MESSAGE = "Source matches contract"
MISMATCH_MESSAGE = "Source didn't match contract"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of one comparison."""

    matched: bool
    compiled: str
    on_chain: str

    @property
    def message(self) -> str:
        return MATCH_MESSAGE if self.matched else MISMATCH_MESSAGE


@dataclass(frozen=True)
class BytecodeLock:
    """
    Compiled vs. deployed creation bytecode.

    Equality is exact; nothing is normalized before comparing.
    """

    contract_address: str
    compiled_bytecode: str
    on_chain_bytecode: str

    def verify(self) -> VerificationResult:
        return VerificationResult(
            matched=self.compiled_bytecode == self.on_chain_bytecode,
            compiled=self.compiled_bytecode,
            on_chain=self.on_chain_bytecode,
        )
