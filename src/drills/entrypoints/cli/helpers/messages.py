"""Terminal message helpers for the DRILLS CLI.

Small helpers for rendering user-visible lines with emoji->ASCII fallbacks.
Messages write to stderr so stdout only carries command results.
"""

import click

SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
CAUTION_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(glyphs: tuple[str, str]) -> str:
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Shop is closed.``
    """
    click.secho(f"{_glyph(CAUTION_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Validation successful``
    """
    click.secho(f"{_glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Invalid price``
    """
    click.secho(f"{_glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
