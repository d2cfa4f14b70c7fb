"""
Solidity source collection.

Walks a contract's ``src/`` tree and returns every ``.sol`` file keyed by
its path relative to that root, the same keys solc expects in
standard-JSON ``sources``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

SOURCE_DIRNAME = "src"
SOURCE_PATTERN = "**/*.sol"


class SourceCollectionError(RuntimeError):
    """Source root could not be enumerated."""


def source_root(contract_dir: Union[str, Path]) -> Path:
    return Path(contract_dir) / SOURCE_DIRNAME


def collect_sources(root: Union[str, Path]) -> Dict[str, str]:
    """
    Load all ``*.sol`` files below ``root`` at any depth.

    Args:
        root: Source root directory

    Returns:
        Mapping of POSIX relative path to file text, ordered by path.
        Empty when the tree holds no Solidity files.

    Raises:
        SourceCollectionError: If ``root`` is missing or unreadable
    """
    root = Path(root)
    if not root.is_dir():
        logger.error("Source root %s is not a directory", root)
        raise SourceCollectionError("Error getting files in dir")
    try:
        files = sorted(p for p in root.glob(SOURCE_PATTERN) if p.is_file())
    except OSError as e:
        logger.error("Failed to enumerate %s: %s", root, e)
        raise SourceCollectionError("Error getting files in dir") from e

    sources = {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8") for p in files
    }
    if not sources:
        logger.warning("No Solidity sources under %s", root)
    else:
        logger.info("Collected %d Solidity sources from %s", len(sources), root)
    return sources
