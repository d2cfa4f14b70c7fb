"""
Verification pipeline.

Loader -> Collector -> Compiler -> Explorer -> comparison, strictly in that
order. Every stage's output is passed explicitly to the next; nothing is
retried and any failure propagates to the caller.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

from bytecode_verify.eth.bytecode_lock import BytecodeLock, VerificationResult, keccak_hex
from bytecode_verify.eth.compiler import SolcSnapshot, compile_sources, load_remote_version
from bytecode_verify.eth.descriptor import load_descriptor
from bytecode_verify.eth.explorer import ExplorerClient
from bytecode_verify.eth.settings import Settings
from bytecode_verify.eth.sources import collect_sources, source_root

logger = logging.getLogger(__name__)

CompilerResolver = Callable[[str], SolcSnapshot]


def run_verification(
    contract_dir: Union[str, Path],
    *,
    settings: Optional[Settings] = None,
    resolve_compiler: Optional[CompilerResolver] = None,
    explorer: Optional[ExplorerClient] = None,
) -> VerificationResult:
    """
    Verify a contract directory against its on-chain creation bytecode.

    Args:
        contract_dir: Directory holding ``info.json`` and ``src/``
        settings: Configuration (loaded from the environment when None)
        resolve_compiler: Version -> snapshot (py-solc-x when None)
        explorer: Explorer client (built from settings when None)

    Returns:
        VerificationResult with the match flag and both bytecodes
    """
    settings = settings or Settings.load()
    resolve_compiler = resolve_compiler or partial(
        load_remote_version,
        binary_dir=settings.SOLC_BINARY_DIR or None,
        allow_install=settings.SOLC_ALLOW_INSTALL,
    )

    descriptor = load_descriptor(contract_dir)
    sources = collect_sources(source_root(contract_dir))

    snapshot = resolve_compiler(descriptor.compiler_version)
    compiled = compile_sources(snapshot, descriptor, sources)

    if explorer is None:
        with ExplorerClient.from_settings(settings) as owned:
            on_chain = owned.fetch_creation_bytecode(descriptor.contract_address)
            metrics = owned.metrics
    else:
        on_chain = explorer.fetch_creation_bytecode(descriptor.contract_address)
        metrics = explorer.metrics

    result = BytecodeLock(descriptor.contract_address, compiled, on_chain).verify()
    logger.info(
        "compiled=%s on_chain=%s matched=%s",
        keccak_hex(compiled),
        keccak_hex(on_chain),
        result.matched,
    )
    logger.debug("explorer metrics: %s", metrics.snapshot())
    return result
