"""
Solidity compiler adapter.

Resolves an exact solc release through py-solc-x (downloading it when it
is not installed yet) and compiles a source set with a standard-JSON
invocation restricted to one contract's creation bytecode.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import solcx
from solcx.exceptions import SolcError, SolcNotInstalled
from solcx.install import get_executable

from bytecode_verify.eth.descriptor import Descriptor

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"
BYTECODE_OUTPUT = "evm.bytecode.object"

# "0.8.4", "v0.8.4", "v0.8.4+commit.c7e474f2"; group 2 holds a prerelease tag
_VERSION_RE = re.compile(
    r"^v?(\d+\.\d+\.\d+)(-[0-9A-Za-z.\-]+)?(?:\+commit\.[0-9a-fA-F]+)?$"
)


class CompilerResolutionError(RuntimeError):
    """Requested compiler version could not be obtained."""


class CompilationError(RuntimeError):
    """Compiler failed or produced no bytecode for the requested contract."""


@dataclass(frozen=True)
class SolcSnapshot:
    """A resolved solc binary of one exact version."""

    version: str
    executable: Path

    def compile(self, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Compile a standard-JSON input with this binary.

        Returns:
            Parsed compiler output

        Raises:
            CompilationError: If solc fails or reports errors
        """
        try:
            return solcx.compile_standard(input_data, solc_binary=self.executable)
        except SolcError as e:
            raise CompilationError(f"solc {self.version} failed: {e.message}") from e


def normalize_version(version: str) -> str:
    """
    Reduce a version identifier to the ``X.Y.Z`` release py-solc-x installs.

    Only a ``+commit.<hash>`` build suffix is dropped. Prerelease and nightly
    builds are a different compiler and are rejected.
    """
    m = _VERSION_RE.match(version.strip())
    if not m:
        raise ValueError(f"Unrecognised compiler version: {version!r}")
    if m.group(2):
        raise ValueError(f"Prerelease compiler builds are not supported: {version!r}")
    return m.group(1)


def load_remote_version(
    version: str,
    *,
    binary_dir: Optional[Union[str, Path]] = None,
    allow_install: bool = True,
) -> SolcSnapshot:
    """
    Obtain a solc snapshot for an exact version.

    Uses an installed binary when one exists, otherwise installs it.

    Args:
        version: Version identifier, short or solc-js long form
        binary_dir: solc install folder (py-solc-x default when None)
        allow_install: Download the release when it is not installed

    Raises:
        CompilerResolutionError: On a bad identifier, a failed download or
            a missing binary with installs disabled
    """
    path = Path(binary_dir) if binary_dir else None
    try:
        wanted = normalize_version(version)
        installed = {str(v) for v in solcx.get_installed_solc_versions(path)}
        if wanted not in installed:
            if not allow_install:
                raise SolcNotInstalled(
                    f"solc {wanted} is not installed and installs are disabled"
                )
            logger.info("Installing solc %s", wanted)
            solcx.install_solc(wanted, solcx_binary_path=path)
        executable = get_executable(wanted, solcx_binary_path=path)
    except Exception as e:
        logger.error("Failed to resolve solc %s: %s", version, e)
        raise CompilerResolutionError("Error getting remote version") from e

    logger.info("Using solc %s at %s", wanted, executable)
    return SolcSnapshot(version=wanted, executable=Path(executable))


def build_compiler_input(
    descriptor: Descriptor, sources: Dict[str, str]
) -> Dict[str, Any]:
    """Standard-JSON input selecting only the contract's bytecode object."""
    return {
        "language": "Solidity",
        "sources": {name: {"content": text} for name, text in sources.items()},
        "settings": {
            "optimizer": {"enabled": descriptor.optimizations},
            "outputSelection": {
                descriptor.source_name: {
                    descriptor.contract_name: [BYTECODE_OUTPUT],
                },
            },
        },
    }


def assemble_bytecode(bytecode_object: str, constructor_args: str) -> str:
    """Prefix and append constructor arguments, verbatim."""
    return f"{HEX_PREFIX}{bytecode_object}{constructor_args}"


def compile_sources(
    snapshot: SolcSnapshot, descriptor: Descriptor, sources: Dict[str, str]
) -> str:
    """
    Compile a source set and return the expected creation bytecode.

    Raises:
        CompilationError: On empty sources, compiler errors, or no output
            for ``descriptor.source_name`` / ``descriptor.contract_name``
    """
    if not sources:
        raise CompilationError("No Solidity sources to compile")

    output = snapshot.compile(build_compiler_input(descriptor, sources))

    errors = [e for e in output.get("errors", []) if e.get("severity") == "error"]
    if errors:
        msgs = "; ".join(e.get("formattedMessage") or e.get("message", "") for e in errors)
        logger.error("solc %s reported %d error(s)", snapshot.version, len(errors))
        raise CompilationError(f"Compilation failed: {msgs}")

    try:
        obj = output["contracts"][descriptor.source_name][descriptor.contract_name][
            "evm"
        ]["bytecode"]["object"]
    except KeyError as e:
        raise CompilationError(
            f"No bytecode for {descriptor.source_name}:{descriptor.contract_name} "
            "in compiler output"
        ) from e

    return assemble_bytecode(obj, descriptor.constructor_arguments_encoded)
