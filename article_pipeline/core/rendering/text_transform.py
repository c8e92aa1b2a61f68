"""
Text transforms used while rendering articles.
"""

import re

EPISODE_PATTERN = re.compile(r"(?i:episode) (?P<ep_num>\d+)")


class PatternNotFoundError(Exception):
    """Raised when a title has no "Episode <number>" marker."""
    pass


def clean_text(raw: str) -> str:
    """
    Tidy a text field for Markdown output.

    Trims whitespace, drops one leading and one trailing double quote,
    and turns literal ``\\n`` and ``\\"`` sequences into a newline and a
    plain quote. A trailing ``\\"`` is an escaped quote, not a wrapper,
    and is kept.
    """
    text = str(raw).strip()
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"') and not text.endswith('\\"'):
        text = text[:-1]

    text = text.replace("\\n", "\n")
    text = text.replace('\\"', '"')
    return text


def toml_str(value: str) -> str:
    """Escape ``value`` for use inside a TOML basic (double-quoted) string."""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return text.replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r")


def add_quotes(text: str) -> str:
    return f'"{text}"'


def derive_filename(title: str) -> str:
    """
    Build ``episode_XXXX.md`` from the episode number in ``title``.

    The number is zero-padded to at least four digits; longer numbers
    are kept whole.

    Raises:
        PatternNotFoundError: If ``title`` has no episode marker.
    """
    match = EPISODE_PATTERN.search(title)
    if match is None:
        raise PatternNotFoundError(f"No 'Episode <number>' in title: {title!r}")

    return f"episode_{match.group('ep_num'):0>4}.md"
