"""
Command-line entry point.

Usage:
    verify-contract ./0xabc...
    python -m bytecode_verify ./0xabc... --log-level INFO
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

import click
from dotenv import load_dotenv

from bytecode_verify.eth.settings import LOG_LEVELS, Settings
from bytecode_verify.pipeline import run_verification


@click.command()
@click.argument("contract_dir", type=click.Path(file_okay=False))
@click.option("--explorer-url", default=None, help="Explorer base URL (overrides EXPLORER_URL)")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides LOG_LEVEL)",
)
def main(contract_dir: str, explorer_url: Optional[str], log_level: Optional[str]):
    """
    Check that CONTRACT_DIR's sources compile to the deployed bytecode.

    CONTRACT_DIR must hold info.json and a src/ tree of .sol files.
    Prints a single line saying whether the source matches.
    """
    load_dotenv()
    settings = Settings.load()
    if explorer_url:
        settings = dataclasses.replace(settings, EXPLORER_URL=explorer_url.rstrip("/"))
    if log_level:
        settings = dataclasses.replace(settings, LOG_LEVEL=log_level.upper())

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = run_verification(contract_dir, settings=settings)
    click.echo(result.message)


if __name__ == "__main__":
    main()
