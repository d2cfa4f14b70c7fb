"""
Contract descriptor loading.

Each contract directory carries an ``info.json`` naming the contract,
the compiler version and the settings it was deployed with.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from eth_utils import is_hex
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "info.json"


class Descriptor(BaseModel):
    """What to verify and how it was compiled."""

    contract_address: str = Field(alias="contractAddress")
    source_name: str = Field(alias="sourceName")  # top-level key in solc output
    contract_name: str = Field(alias="contractName")
    compiler_version: str = Field(alias="compilerVersion")
    optimizations: bool
    constructor_arguments_encoded: str = Field(alias="constructorArgumentsEncoded")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("constructor_arguments_encoded")
    @classmethod
    def _hex_args(cls, v: str) -> str:
        # Appended verbatim to the compiled object, so no prefix stripping here
        if v and not is_hex(v):
            raise ValueError("constructorArgumentsEncoded must be a hex string")
        return v


def load_descriptor(contract_dir: Union[str, Path]) -> Descriptor:
    """
    Read and parse ``info.json`` from a contract directory.

    Raises:
        FileNotFoundError: If the descriptor is missing
        pydantic.ValidationError: If it is not valid JSON or a field is
            missing or ill-typed
    """
    path = Path(contract_dir) / DESCRIPTOR_FILENAME
    descriptor = Descriptor.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded descriptor for %s:%s at %s (solc %s, optimizer=%s)",
        descriptor.source_name,
        descriptor.contract_name,
        descriptor.contract_address,
        descriptor.compiler_version,
        descriptor.optimizations,
    )
    return descriptor
