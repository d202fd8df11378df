"""`entwine sample` command: print values from a built-in family."""

import json
import logging

import typer

from ...config import load_config
from ...families import FAMILY_NAMES, get_family
from ...sampler import sample_values
from ..app import app


logger = logging.getLogger(__name__)


@app.command("sample")
def sample_command(
    family: str = typer.Argument(..., help=f"One of: {', '.join(FAMILY_NAMES)}"),
    count: int | None = typer.Option(None, "--count", "-n", help="Number of values"),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Random seed"),
    bias: int | None = typer.Option(None, "--bias", "-b", help="Bias frequency"),
    max_depth: int | None = typer.Option(None, "--max-depth", help="Maximum nesting depth"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON document"),
) -> None:
    """Sample values from a recursive generator family."""
    settings = load_config().generation
    count = settings.count if count is None else count
    seed = settings.seed if seed is None else seed
    bias = settings.bias_frequency if bias is None else bias
    max_depth = settings.max_depth if max_depth is None else max_depth

    try:
        generator = get_family(family, max_depth=max_depth)
        result = sample_values(generator, count=count, seed=seed, bias_frequency=bias)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    for value in result.values:
        typer.echo(json.dumps(value) if not isinstance(value, str) else value)
    logger.info(f"Sampled {result.count} values from '{family}' with seed={result.seed}")
