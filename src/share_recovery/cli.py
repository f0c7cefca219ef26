"""Command line interface for secret recovery."""

from __future__ import annotations

import json
import logging
import warnings
from pathlib import Path

import click

from . import policy as _policy_module
from .errors import ShareCountMismatch, ShareRecoveryError
from .ingest import ShareDocument, load_document
from .report import render, to_dict
from .search import recover

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_logger = logging.getLogger(__name__)


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(_policy_module.policy.log_level)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("share_recovery").setLevel(level)


def _load(input_path: Path) -> ShareDocument:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ShareCountMismatch)
        document = load_document(input_path)
    for warning in caught:
        _logger.warning("%s", warning.message)
    return document


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "input_path",
    default="input.json",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("-k", "--threshold", type=click.IntRange(min=1), default=None, help="Override the threshold declared in the document.")
@click.option("-w", "--workers", type=click.IntRange(min=1), default=None, help="Processes used to score subsets.")
@click.option("--progress/--no-progress", default=False, help="Show a progress bar over the subsets.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def main(input_path: Path, threshold: int | None, workers: int | None, progress: bool, as_json: bool, verbose: int) -> None:
    """Recover the secret from the shares in INPUT_PATH and list the wrong shares."""
    _configure_logging(verbose)
    try:
        document = _load(input_path)
        result = recover(
            document.shares,
            threshold if threshold is not None else document.k,
            workers=workers,
            progress=progress,
        )
    except ShareRecoveryError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(to_dict(result), indent=2))
    else:
        click.echo(render(result))


if __name__ == "__main__":
    main()
