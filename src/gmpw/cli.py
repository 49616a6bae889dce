import random
from pathlib import Path
from typing import Annotated

import srsly
import typer

from gmpw import __version__
from gmpw.errors import PasswordError
from gmpw.generate import generate_password
from gmpw.models import PasswordRequest, PasswordResult
from gmpw.options import parse_bool_option

app = typer.Typer(help="Generate a random password.")

AVOID_AMBIGUOUS_OPTION = "avoid-ambiguous"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gmpw {__version__}")
        raise typer.Exit()


def _write_results(output: Path, results: list[PasswordResult]) -> None:
    srsly.write_jsonl(
        str(output), [result.model_dump(mode="json") for result in results]
    )


@app.command()
def generate(
    ctx: typer.Context,
    length: Annotated[
        int,
        typer.Option(
            "--length",
            "-n",
            help="Length of password, must be between 3-20",
        ),
    ],
    digit: Annotated[
        int | None,
        typer.Option("--digit", "-d", help="Number of digits"),
    ] = None,
    upper: Annotated[
        int | None,
        typer.Option("--upper", "-u", help="Number of upper case letters"),
    ] = None,
    lower: Annotated[
        int | None,
        typer.Option("--lower", "-l", help="Number of lower case letters"),
    ] = None,
    avoid_ambiguous: Annotated[
        str,
        typer.Option(
            f"--{AVOID_AMBIGUOUS_OPTION}",
            "-a",
            help="Avoid chars 'oO0l1' (true or false)",
        ),
    ] = "true",
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed")
    ] = None,
    count: Annotated[
        int,
        typer.Option("--count", "-c", min=1, help="Number of passwords"),
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write results as JSONL"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Generate a random password of digits, lower and upper case letters.

    Example: gmpw -n 10
    """
    rng = random.Random(seed)
    results: list[PasswordResult] = []
    try:
        should_avoid = parse_bool_option(
            AVOID_AMBIGUOUS_OPTION, avoid_ambiguous
        )
        request = PasswordRequest(
            length=length,
            digit_count=digit,
            upper_count=upper,
            lower_count=lower,
            avoid_ambiguous=should_avoid,
        )
        for _ in range(count):
            result = generate_password(request, rng=rng, seed=seed)
            typer.echo(result.summary())
            typer.echo(result.password)
            results.append(result)
    except PasswordError as err:
        typer.echo(str(err))
        typer.echo(ctx.get_help())
    finally:
        if output is not None and results:
            _write_results(output, results)
