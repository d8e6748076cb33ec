"""Terminal message helpers for the VOTER REGISTRY CLI.

Status lines are written to **stderr** so stdout carries only command results
(e.g., the register outcome), which keeps it safe to pipe. Each line starts
with a glyph; terminals that cannot encode the emoji get an ASCII fallback.
"""

import click

#: kind -> (emoji, ascii fallback, color)
GLYPHS = {
    "warn": ("⚠️", "[!]", "yellow"),
    "success": ("✅", "[OK]", "green"),
    "error": ("❌", "[X]", "red"),
}  # pragma: no mutate


def supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: The Unicode character to probe (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for a message kind, falling back to ASCII."""
    emoji, fallback, _ = GLYPHS[kind]
    return emoji if supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    color = GLYPHS[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  This will delete every registered voter.``
    """
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Schema initialized.``
    """
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Cannot connect to database.``
    """
    _emit("error", msg)
