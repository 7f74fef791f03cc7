"""HTTP client fetching candidate words from gratiskryssord.no."""

from __future__ import annotations

import os
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Dict, List, Optional, Protocol, Tuple, Union
from urllib.parse import quote, urljoin

import requests

from ..core.constants import UNREADABLE_KEY_MARKER
from ..core.exceptions import LookupServiceError
from ..data.normalization import clean_word, is_single_word
from ..data.pattern import matches, parse_pattern
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

Constraint = Union[int, str, None]

NEXT_LINK_PREFIX = "shFunc.setNextLink('"


class WordLookup(Protocol):
    """Anything that can turn a hint into candidate words."""

    def lookup(self, hint: str, constraint: Constraint = None) -> List[str]:
        ...


@dataclass
class LookupConfig:
    """Configuration for the remote crossword dictionary."""

    base_url: str = "https://www.gratiskryssord.no/kryssordbok/"
    timeout_seconds: float = 15.0
    max_pages: int = 20
    user_agent: str = "kryss/0.1"

    @classmethod
    def from_env(cls, url_env: str = "KRYSS_LOOKUP_URL") -> "LookupConfig":
        config = cls()
        override = os.environ.get(url_env)
        if override:
            config.base_url = override if override.endswith("/") else override + "/"
        return config


def satisfies(word: str, constraint: Constraint) -> bool:
    """Check ``word`` against a length or a ``.``-wildcard pattern."""

    if constraint is None:
        return True
    if isinstance(constraint, int):
        return len(word) == constraint
    return matches(word, parse_pattern(constraint))


class WordListParser(HTMLParser):
    """Collects answer words and the pagination link from a result page.

    Answer words are link texts inside list items of the article body; the
    next page is announced through an ``ng-init`` attribute.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.words: List[str] = []
        self.next_link: Optional[str] = None
        self._stack: List[str] = []
        self._buffer: List[str] = []
        self._in_answer = False

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        attributes: Dict[str, Optional[str]] = dict(attrs)
        init = attributes.get("ng-init") or ""
        if init.startswith(NEXT_LINK_PREFIX):
            self.next_link = init[len(NEXT_LINK_PREFIX):].replace("');", "").strip()

        if tag == "a" and {"article", "section", "li"} <= set(self._stack):
            self._in_answer = True
            self._buffer = []
        self._stack.append(tag)

    def handle_endtag(self, tag: str) -> None:
        if tag == "a" and self._in_answer:
            self._in_answer = False
            text = "".join(self._buffer).strip()
            if text:
                self.words.append(text)
        # tolerate unclosed tags by unwinding to the matching opener
        if tag in self._stack:
            while self._stack:
                if self._stack.pop() == tag:
                    break

    def handle_data(self, data: str) -> None:
        if self._in_answer:
            self._buffer.append(data)


class GratiskryssordClient:
    """Minimal client around the gratiskryssord.no crossword dictionary."""

    def __init__(
        self,
        config: Optional[LookupConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or LookupConfig.from_env()
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", self.config.user_agent)

    def lookup(self, hint: str, constraint: Constraint = None) -> List[str]:
        """Return every single-word answer for ``hint`` matching ``constraint``."""

        if UNREADABLE_KEY_MARKER in hint:
            LOGGER.info("Skip looking up unreadable key %s", hint)
            return []

        LOGGER.info("Looking up %s from gratiskryssord", hint)
        found: Dict[str, None] = {}
        url: Optional[str] = urljoin(self.config.base_url, quote(hint))
        pages = 0
        while url and pages < self.config.max_pages:
            parser = WordListParser()
            parser.feed(self._fetch(url))
            parser.close()
            pages += 1
            for raw in parser.words:
                word = clean_word(raw)
                if is_single_word(word):
                    found.setdefault(word, None)
            next_url = urljoin(url, parser.next_link) if parser.next_link else None
            url = next_url if next_url != url else None

        words = [word for word in found if satisfies(word, constraint)]
        LOGGER.debug("Lookup of %s returned %d word(s) over %d page(s)", hint, len(words), pages)
        return words

    def _fetch(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise LookupServiceError(f"Lookup request failed: {exc}") from exc
        return response.text
