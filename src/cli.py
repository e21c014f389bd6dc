"""
Click-based CLI for the F1 podium snapshot.

Usage:
    python -m src.cli setup
    python -m src.cli fetch                 # default seasons
    python -m src.cli fetch 2022 2023 2024
    python -m src.cli fetch 2024 --output site/data/races.json
"""
import sys
from pathlib import Path

import click
from src.config import cfg
from src.utils.logger import setup_logger, logger


def parse_years(tokens: tuple[str, ...] | list[str]) -> list[int]:
    """
    Keep tokens that are positive integers; fall back to the default seasons.
    """
    years = []
    for token in tokens:
        try:
            year = int(token)
        except ValueError:
            logger.debug(f"Ignoring non-numeric year argument: {token!r}")
            continue
        if year > 0:
            years.append(year)
    return years or list(cfg.api.default_years)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help=f"Console log level [default: {cfg.log.console_level}].",
)
def cli(log_level: str | None) -> None:
    """🏎️  F1 Podium Snapshot"""
    setup_logger(log_dir=cfg.paths.logs, level=log_level.upper() if log_level else None)


@cli.command()
def setup() -> None:
    """Initialize project directories."""
    logger.info("Setting up project directories...")
    cfg.paths.setup()
    logger.success("✅ All directories created.")


@cli.command()
@click.argument("years", nargs=-1)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Snapshot file to write [default: {cfg.paths.output}].",
)
def fetch(years: tuple[str, ...], output: Path | None) -> None:
    """Fetch podiums for YEARS from OpenF1 and write the JSON snapshot."""
    from src.ingest_openf1.pipeline import run_fetch_pipeline

    try:
        run_fetch_pipeline(parse_years(years), output_path=output)
    except Exception as e:
        logger.exception(f"Fatal: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
