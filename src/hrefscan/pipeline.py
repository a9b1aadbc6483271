"""
Pipeline orchestration for hrefscan.

One run is a single linear pass: parse the input text, compile the selector,
extract link values from matching elements, drop repeats and format the
survivors for output.
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Iterator, List, TextIO

import structlog

from hrefscan.config import Settings
from hrefscan.dedup import OrderedDeduplicator
from hrefscan.errors import InputReadError
from hrefscan.extractor import (
    DEFAULT_ATTRIBUTE,
    DEFAULT_PARSER,
    compile_selector,
    extract_links,
    parse_document,
)
from hrefscan.output import emit_lines, format_links

logger = structlog.get_logger(__name__)


class PipelineStage(Enum):
    """Pipeline processing stages."""

    PARSE = "parse"
    SELECT = "select"
    EXTRACT = "extract"
    DEDUPLICATE = "deduplicate"
    EMIT = "emit"
    DONE = "done"


def read_input(stream: BinaryIO) -> str:
    """Read a byte stream to its end and decode it as UTF-8, replacing invalid sequences.

    Raises:
        InputReadError: If the stream cannot be read
    """
    try:
        data = stream.read()
    except OSError as e:
        raise InputReadError(f"failed to read input: {e}") from e
    return data.decode("utf-8", errors="replace")


def iter_links(
    text: str,
    style: str | None = None,
    base: str | None = None,
    *,
    attribute: str = DEFAULT_ATTRIBUTE,
    parser: str = DEFAULT_PARSER,
    deduplicator: OrderedDeduplicator | None = None,
) -> Iterator[str]:
    """Lazily produce the output lines for ``text``.

    Parsing and selector compilation happen eagerly, so a bad selector raises
    here rather than on first iteration.

    Args:
        text: Markup to scan
        style: CSS selector, ``a`` when None
        base: String prefixed to every link, if given
        attribute: Attribute holding the link value
        parser: BeautifulSoup tree builder name
        deduplicator: Seen-set to use; a fresh one when None

    Returns:
        Iterator over distinct, formatted links in order of first appearance

    Raises:
        SelectorSyntaxError: If ``style`` cannot be compiled
    """
    document = parse_document(text, parser)
    logger.debug("Parsed document", stage=PipelineStage.PARSE.value, parser=parser, length=document.source_length)

    matcher = compile_selector(style)
    logger.debug("Compiled selector", stage=PipelineStage.SELECT.value, selector=matcher.pattern)

    if deduplicator is None:
        deduplicator = OrderedDeduplicator()

    logger.debug("Extracting links", stage=PipelineStage.EXTRACT.value, attribute=attribute)
    links = extract_links(document, matcher, attribute)
    return format_links(deduplicator.filter(links), base)


def collect_links(
    text: str,
    style: str | None = None,
    base: str | None = None,
    *,
    attribute: str = DEFAULT_ATTRIBUTE,
    parser: str = DEFAULT_PARSER,
) -> List[str]:
    """Return the full ordered list of output lines for ``text``."""
    return list(iter_links(text, style, base, attribute=attribute, parser=parser))


def run(settings: Settings, stdin: BinaryIO, stdout: TextIO) -> int:
    """Run the pipeline from ``stdin`` to ``stdout`` and return the number of lines written."""
    log = logger.bind(selector=settings.style, attribute=settings.attribute)

    text = read_input(stdin)
    log.debug("Read input", length=len(text))

    deduplicator = OrderedDeduplicator()
    lines = iter_links(
        text,
        settings.style,
        settings.url,
        attribute=settings.attribute,
        parser=settings.parser,
        deduplicator=deduplicator,
    )

    log.debug("Emitting links", stage=PipelineStage.EMIT.value, base=settings.url)
    written = emit_lines(lines, stdout)
    log.debug("Deduplicated links", stage=PipelineStage.DEDUPLICATE.value, **deduplicator.get_stats())
    log.debug("Pipeline completed", stage=PipelineStage.DONE.value, written=written)
    return written
