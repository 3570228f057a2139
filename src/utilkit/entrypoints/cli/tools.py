"""utilkit CLI: wrappers over the pure helpers in ``utilkit.utils``.

Every command prints its result to **stdout** so it can be piped;
human-oriented notices go to **stderr**.

Failure modes
- Invalid input (bad currency, locale, date, JSON) → ``click.BadParameter``
  or ``click.ClickException``, exit code 1 or 2.
- ``email`` exits with code 1 when the address does not look valid.
"""

from __future__ import annotations

import json
import logging
import random
from datetime import datetime
from typing import IO, Any

import click

from utilkit import config
from utilkit.adapters.id_generators import RandomStringIdGenerator, UUIDv4Generator
from utilkit.errors import InvalidCurrencyError, InvalidLocaleError, InvalidSettingError
from utilkit.interfaces.id_generator import IdGenerator
from utilkit.utils.emails import validate_email
from utilkit.utils.ids import DEFAULT_LENGTH
from utilkit.utils.mappings import is_empty_object
from utilkit.utils.money import format_price
from utilkit.utils.sequences import group_by
from utilkit.utils.sequences import shuffle as shuffle_items
from utilkit.utils.slugify import generate_slug
from utilkit.utils.text import DEFAULT_SUFFIX, truncate_text
from utilkit.utils.timeago import PHRASINGS, time_elapsed

from .helpers import error, success

logger = logging.getLogger(__name__)


def get_settings() -> config.Settings:
    """Load settings, turning configuration errors into a CLI error."""
    try:
        return config.load_settings()
    except InvalidSettingError as e:
        raise click.ClickException(str(e)) from e


def _read_json(stream: IO[str]) -> Any:
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}") from e


@click.command()
@click.argument("amount", type=float)
@click.option("--currency", "-c", help="ISO 4217 code. [default: $UTILKIT_CURRENCY or EUR]")
@click.option("--locale", "-l", help="Locale such as fr_FR. [default: $UTILKIT_LOCALE or fr_FR]")
def price(amount: float, currency: str | None, locale: str | None) -> None:
    """Format AMOUNT as a price."""
    settings = get_settings()
    try:
        text = format_price(
            amount, currency or settings.currency, locale or settings.locale
        )
    except InvalidCurrencyError as e:
        raise click.BadParameter(str(e), param_hint="'--currency'") from e
    except InvalidLocaleError as e:
        raise click.BadParameter(str(e), param_hint="'--locale'") from e
    click.echo(text)


@click.command()
@click.option(
    "--length", "-n", type=click.IntRange(min=0), default=DEFAULT_LENGTH, show_default=True
)
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--uuid", "use_uuid", is_flag=True, help="Generate UUIDv4s instead.")
def uid(length: int, count: int, use_uuid: bool) -> None:
    """Generate random alphanumeric identifiers, one per line."""
    generator: IdGenerator = (
        UUIDv4Generator() if use_uuid else RandomStringIdGenerator(length=length)
    )
    for _ in range(count):
        click.echo(generator.new_id())


@click.command()
@click.argument("text")
@click.argument("max_length", type=click.IntRange(min=0))
@click.option("--suffix", default=DEFAULT_SUFFIX, show_default=True)
def truncate(text: str, max_length: int, suffix: str) -> None:
    """Shorten TEXT to at most MAX_LENGTH characters."""
    click.echo(truncate_text(text, max_length, suffix))


@click.command()
@click.argument("text")
def slug(text: str) -> None:
    """Convert TEXT to a URL slug."""
    click.echo(generate_slug(text))


@click.command()
@click.argument("address")
@click.pass_context
def email(ctx: click.Context, address: str) -> None:
    """Check that ADDRESS looks like an email address (exit code 1 if not)."""
    if validate_email(address):
        click.echo("true")
        success(f"{address!r} looks like an email address.")
        return
    click.echo("false")
    error(f"{address!r} does not look like an email address.")
    ctx.exit(1)


@click.command()
@click.argument("date")
@click.option(
    "--lang",
    "language",
    type=click.Choice(sorted(PHRASINGS)),
    default="fr",
    show_default=True,
)
def ago(date: str, language: str) -> None:
    """Describe how long ago DATE (ISO 8601) was."""
    try:
        moment = datetime.fromisoformat(date)
    except ValueError as e:
        raise click.BadParameter(
            f"Expected an ISO 8601 date, got {date!r}", param_hint="'DATE'"
        ) from e
    click.echo(time_elapsed(moment, language=language))


@click.command()
@click.argument("items", nargs=-1)
@click.option("--seed", type=int, help="Seed for a reproducible order.")
def shuffle(items: tuple[str, ...], seed: int | None) -> None:
    """Print ITEMS in random order, one per line."""
    rng = random.Random(seed) if seed is not None else None
    for item in shuffle_items(items, rng=rng):
        click.echo(item)


@click.command()
@click.argument("key")
@click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r"),
    default="-",
    help="JSON array to read. [default: stdin]",
)
def group(key: str, source: IO[str]) -> None:
    """Group a JSON array of objects by KEY and print the result as JSON."""
    data = _read_json(source)
    if not isinstance(data, list):
        raise click.ClickException("Input must be a JSON array.")
    try:
        groups = group_by(data, key)
    except TypeError as e:
        raise click.ClickException(f"Values of {key!r} must be scalars: {e}") from e
    logger.debug("Grouped %d items into %d groups by %r", len(data), len(groups), key)
    click.echo(json.dumps(groups, ensure_ascii=False, indent=2))


@click.command()
@click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r"),
    default="-",
    help="JSON value to read. [default: stdin]",
)
def empty(source: IO[str]) -> None:
    """Print whether a JSON object, array or string (or null) has no members."""
    data = _read_json(source)
    if data is not None and not isinstance(data, (dict, list, str)):
        raise click.ClickException("Input must be a JSON object, array, string or null.")
    click.echo("true" if is_empty_object(data) else "false")
