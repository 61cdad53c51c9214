"""Terminal message helpers for the toolshed CLI.

Lines go to stderr so stdout stays machine-readable. Glyphs fall back to ASCII
when the stream cannot encode emoji.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{_glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{_glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
