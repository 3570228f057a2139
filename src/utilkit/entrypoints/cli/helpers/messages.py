"""Terminal message helpers for the utilkit CLI.

Notices go to **stderr** so stdout stays machine-readable (``utilkit slug``
output can be piped as-is). Each notice starts with a glyph that falls back to
ASCII when stderr cannot encode the emoji.
"""

import click

GLYPHS = {
    # name: (emoji, ASCII fallback)
    "caution": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; tests and ``CliRunner`` swap it.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(name: str) -> str:
    """Return the emoji for *name*, or its ASCII fallback if stderr can't encode it."""
    emoji, fallback = GLYPHS[name]
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr, e.g. ``⚠️  Server answered 404``."""
    click.secho(f"{glyph('caution')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
