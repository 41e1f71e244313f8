"""Bad-word detection."""

import re
from typing import Iterable, Optional

import logfire

from .base import Service


def compile_matcher(words: Iterable[str]) -> Optional[re.Pattern[str]]:
    """Build a case-insensitive whole-word matcher.

    Args:
        words: Words to match; blanks are ignored

    Returns:
        Compiled pattern, or None when there is nothing to match
    """
    escaped = [re.escape(w.strip()) for w in words if w and w.strip()]
    if not escaped:
        return None
    return re.compile(r"\b(?:" + "|".join(escaped) + r")\b", re.IGNORECASE)


class BadWordDetector(Service):
    """Word-boundary matcher over a global list plus per-call custom words.

    The global matcher is compiled once; tenant words are compiled per call.
    """

    def __init__(self, words: Iterable[str], enabled: bool = True) -> None:
        """Initialize detector.

        Args:
            words: Globally configured bad words
            enabled: When False the global list is ignored
        """
        self._global = compile_matcher(words) if enabled else None
        logfire.info(
            "Bad-word detector initialized",
            enabled=self._global is not None,
        )

    @property
    def is_active(self) -> bool:
        """Whether the global list matches anything."""
        return self._global is not None

    def scan(self, content: str, custom_words: Iterable[str] = ()) -> list[str]:
        """Find bad words in content.

        Global matches come first, then tenant matches, each in order of
        appearance. Surface casings of the same word collapse to the first
        one seen.

        Args:
            content: Text to scan
            custom_words: Tenant-specific extra words

        Returns:
            Matched words; empty when the content is clean
        """
        found: list[str] = []
        seen: set[str] = set()

        for matcher in (self._global, compile_matcher(custom_words)):
            if matcher is None:
                continue
            for match in matcher.finditer(content):
                word = match.group(0)
                key = word.casefold()
                if key not in seen:
                    seen.add(key)
                    found.append(word)

        return found
