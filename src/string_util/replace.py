r"""Global replace with asynchronous replacement callbacks.

Usage:
    import re
    from string_util import replace_all_async

    async def lookup(match: str, *groups: str | None) -> str:
        return await cache.get(match)

    out = await replace_all_async(text, re.compile(r"\{(\w+)\}"), lookup)

Every callback is started before any of them is awaited, so slow lookups
overlap.  The output is always assembled in scan order, whatever order the
callbacks finish in.
"""

from __future__ import annotations
import asyncio
import logging
import re
from typing import Awaitable, Callable

from .errors import InvalidArgument
from .types import MatchRecord

logger = logging.getLogger(__name__)

AsyncReplacer = Callable[..., Awaitable[str]]


def find_matches(text: str, pattern: str | re.Pattern[str], flags: int = 0) -> list[MatchRecord]:
    """Scan text left to right for every non-overlapping match.

    A plain str is matched literally; a compiled pattern is used as-is.
    """
    if isinstance(pattern, str):
        regex = re.compile(re.escape(pattern), flags)
    elif isinstance(pattern, re.Pattern):
        if flags:
            raise InvalidArgument("flags only apply to a literal pattern")
        regex = pattern
    else:
        raise InvalidArgument(
            f"pattern must be a str or compiled regex, got {type(pattern).__name__}",
            {"argument": "pattern"},
        )

    return [
        MatchRecord(text=m.group(), start=m.start(), end=m.end(), groups=m.groups())
        for m in regex.finditer(text)
    ]


async def replace_all_async(
    text: str,
    pattern: str | re.Pattern[str],
    replacer: AsyncReplacer,
    *,
    flags: int = 0,
) -> str:
    """Replace every match of pattern with the awaited result of replacer.

    ``replacer`` is called as ``replacer(match_text, *groups)``.  If any call
    fails, the remaining calls are cancelled and its exception propagates
    unchanged.
    """
    matches = find_matches(text, pattern, flags)
    if not matches:
        return text

    tasks: list[asyncio.Future[str]] = []
    try:
        for m in matches:
            tasks.append(asyncio.ensure_future(replacer(m.text, *m.groups)))
        logger.debug("replace_all_async: awaiting %d replacements", len(tasks))
        replacements = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise

    parts: list[str] = []
    last = 0
    for match, replacement in zip(matches, replacements):
        if not isinstance(replacement, str):
            raise InvalidArgument(
                f"replacer must resolve to str, got {type(replacement).__name__}",
                {"match": match.text, "start": match.start},
            )
        parts.append(text[last:match.start])
        parts.append(replacement)
        last = match.end
    parts.append(text[last:])
    return "".join(parts)
