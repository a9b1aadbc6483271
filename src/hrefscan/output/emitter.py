"""
Formatting and emission of output lines.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from ..errors import OutputWriteError


def format_links(links: Iterable[str], base: str | None = None) -> Iterator[str]:
    """Prefix each link with ``base`` by plain concatenation, if given."""
    if base is None:
        yield from links
        return
    for link in links:
        yield f"{base}{link}"


def emit_lines(lines: Iterable[str], stream: TextIO) -> int:
    """Write each line followed by a newline and return how many were written.

    Raises:
        OutputWriteError: If the stream rejects a write or flush
    """
    count = 0
    try:
        for line in lines:
            stream.write(f"{line}\n")
            count += 1
        stream.flush()
    except (OSError, UnicodeError) as e:
        raise OutputWriteError(f"failed to write output: {e}") from e
    return count
