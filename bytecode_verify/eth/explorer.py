"""
Block explorer client for contract creation bytecode.

Two lookups, in order:
- account metadata -> hash of the creating transaction
- transaction details -> its input data (the creation bytecode)

No retries, no pagination. HTTP and shape errors propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests
from pydantic import BaseModel, Field

from bytecode_verify.eth.metrics import Metrics
from bytecode_verify.eth.settings import Settings

logger = logging.getLogger(__name__)


class AccountInfo(BaseModel):
    """Subset of ``/api/account/{address}`` we rely on."""

    contract_created_at_tx_hash: str = Field(alias="contractCreatedAtTxHash")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class TransactionInfo(BaseModel):
    """Subset of ``/api/transaction/{hash}`` we rely on."""

    input: str

    model_config = {"extra": "ignore"}


@dataclass
class ExplorerClient:
    """
    Read-only client for a Tomoscan-style explorer API.

    Example:
        client = ExplorerClient("https://tomoscan.io")
        code = client.fetch_creation_bytecode("0x...")
    """

    base_url: str
    timeout: Optional[float] = 8.0
    session: requests.Session = field(default_factory=requests.Session)
    metrics: Metrics = field(default_factory=Metrics)

    @staticmethod
    def from_settings(
        settings: Settings, *, metrics: Optional[Metrics] = None
    ) -> ExplorerClient:
        return ExplorerClient(
            base_url=settings.EXPLORER_URL,
            timeout=settings.EXPLORER_TIMEOUT,
            metrics=metrics or Metrics(),
        )

    def _get_json(self, endpoint: str, path: str) -> dict:
        url = f"{self.base_url.rstrip('/')}/api/{path}"
        with self.metrics.timed(endpoint):
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()

    def fetch_creation_tx_hash(self, address: str) -> str:
        """
        Look up the transaction that created a contract.

        Raises:
            requests.RequestException: Network failure or non-2xx status
            pydantic.ValidationError: Response lacks contractCreatedAtTxHash
        """
        info = AccountInfo.model_validate(self._get_json("account", f"account/{address}"))
        logger.info("Contract %s created in tx %s", address, info.contract_created_at_tx_hash)
        return info.contract_created_at_tx_hash

    def fetch_transaction_input(self, tx_hash: str) -> str:
        """
        Fetch a transaction's input data.

        Raises:
            requests.RequestException: Network failure or non-2xx status
            pydantic.ValidationError: Response lacks input
        """
        tx = TransactionInfo.model_validate(
            self._get_json("transaction", f"transaction/{tx_hash}")
        )
        return tx.input

    def fetch_creation_bytecode(self, address: str) -> str:
        """On-chain creation bytecode: account lookup, then transaction lookup."""
        return self.fetch_transaction_input(self.fetch_creation_tx_hash(address))

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self.session.close()

    def __enter__(self) -> ExplorerClient:
        return self

    def __exit__(self, *_exc) -> None:
        self.close()
