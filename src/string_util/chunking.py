"""Fixed-size chunking.

Chunks are cut on code point boundaries (Python ``str`` indexing), so a
code point is never split.  Grapheme clusters are NOT protected: a base
character and its combining mark, or the parts of a ZWJ emoji sequence,
can land in different chunks.
"""

from __future__ import annotations
import logging

from .errors import InvalidArgument, check_int

logger = logging.getLogger(__name__)


def chunkify(text: str, chunk_length: int) -> list[str]:
    """Split text into pieces of ``chunk_length`` code points.

    The last chunk may be shorter.  Empty input yields an empty list.

    Raises:
        InvalidArgument: text is not a str, or chunk_length is not an
            integer >= 1.
    """
    if not isinstance(text, str):
        raise InvalidArgument(
            f"cannot chunkify a non-string value ({type(text).__name__})",
            {"argument": "text"},
        )
    check_int("chunk_length", chunk_length, 1)

    chunks = [text[i:i + chunk_length] for i in range(0, len(text), chunk_length)]
    logger.debug("chunkify: %d code points -> %d chunks of %d", len(text), len(chunks), chunk_length)
    return chunks
