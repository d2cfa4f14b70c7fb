"""
Contract source verifier.

Compiles a Solidity source tree with the deployment's compiler settings
and checks the result against the contract's on-chain creation bytecode.
"""

__version__ = "0.1.0"
