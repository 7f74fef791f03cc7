"""JSON persistence for the hint dictionary.

The file groups words by length under each key::

    {"words": {"capital of norway": {"4": ["OSLO"]}}}
"""

from __future__ import annotations

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List

from ..core.exceptions import DictionaryLoadError
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def dictionary_from_payload(payload: Any, filename: str | None = None) -> WordDictionary:
    if not isinstance(payload, dict) or not isinstance(payload.get("words"), dict):
        raise DictionaryLoadError("Dictionary JSON must contain a 'words' object")

    dictionary = WordDictionary(filename=filename)
    for key, by_length in payload["words"].items():
        if not isinstance(by_length, dict):
            raise DictionaryLoadError(f"Entry {key!r} must map lengths to word lists")
        try:
            lengths = sorted(by_length, key=int)
        except ValueError as exc:
            raise DictionaryLoadError(f"Entry {key!r} has a non-numeric length") from exc
        words: List[str] = []
        for length in lengths:
            group = by_length[length]
            if not isinstance(group, list):
                raise DictionaryLoadError(f"Entry {key!r}/{length} must be a list")
            words.extend(str(word) for word in group)
        dictionary.add_candidates(key, words)
    dictionary.changed = False
    return dictionary


def dictionary_to_payload(dictionary: WordDictionary) -> Dict[str, Any]:
    words: Dict[str, Dict[str, List[str]]] = {}
    for key, candidates in dictionary.items():
        by_length: Dict[int, List[str]] = defaultdict(list)
        for word in candidates:
            by_length[len(word)].append(word)
        words[key] = {str(length): by_length[length] for length in sorted(by_length)}
    return {"words": words}


def read_dictionary(path: Path | str) -> WordDictionary:
    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read dictionary {source}: {exc}") from exc
    dictionary = dictionary_from_payload(payload, filename=str(source))
    LOGGER.info("Loaded dictionary %s with %d keys", source, len(dictionary))
    return dictionary


def write_dictionary(dictionary: WordDictionary, path: Path | str | None = None) -> Path:
    target = path or dictionary.filename
    if target is None:
        raise DictionaryLoadError("No file name given for the dictionary")
    destination = Path(target)
    destination.write_text(
        json.dumps(dictionary_to_payload(dictionary), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    dictionary.filename = str(destination)
    dictionary.changed = False
    LOGGER.info("Dictionary saved to %s", destination)
    return destination
