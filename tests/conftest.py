"""Shared fixtures for end-to-end verification tests."""

from __future__ import annotations

import json

import pytest

TRIVIAL_CONTRACT = """// SPDX-License-Identifier: MIT
pragma solidity ^0.8.4;

contract A {}
"""


@pytest.fixture
def contract_dir(tmp_path):
    """Contract directory with info.json and a single-file src/ tree."""
    root = tmp_path / ("0x" + "ab" * 20)
    (root / "src").mkdir(parents=True)
    (root / "src" / "A.sol").write_text(TRIVIAL_CONTRACT)
    (root / "info.json").write_text(
        json.dumps(
            {
                "contractAddress": "0x" + "ab" * 20,
                "sourceName": "A.sol",
                "contractName": "A",
                "compilerVersion": "v0.8.4+commit.c7e474f2",
                "optimizations": False,
                "constructorArgumentsEncoded": "",
            }
        )
    )
    return root
