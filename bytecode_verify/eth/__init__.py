"""
Compiler and chain-side building blocks for source verification.
"""

from bytecode_verify.eth.bytecode_lock import BytecodeLock, VerificationResult
from bytecode_verify.eth.compiler import (
    CompilationError,
    CompilerResolutionError,
    SolcSnapshot,
    compile_sources,
    load_remote_version,
)
from bytecode_verify.eth.descriptor import Descriptor, load_descriptor
from bytecode_verify.eth.explorer import ExplorerClient
from bytecode_verify.eth.metrics import Metrics
from bytecode_verify.eth.settings import Settings
from bytecode_verify.eth.sources import SourceCollectionError, collect_sources

__all__ = [
    "BytecodeLock",
    "VerificationResult",
    "CompilationError",
    "CompilerResolutionError",
    "SolcSnapshot",
    "compile_sources",
    "load_remote_version",
    "Descriptor",
    "load_descriptor",
    "ExplorerClient",
    "Metrics",
    "Settings",
    "SourceCollectionError",
    "collect_sources",
]
