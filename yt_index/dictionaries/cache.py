"""Caching for loaded dictionaries.

The cache is an explicit object owned by whoever creates it (normally one
KeywordsService instance), so its lifetime is the owner's lifetime. Entries
are never mutated in place and the oldest entry is evicted once the cache
holds max_entries (DICTIONARIES_CACHE_MAX_ENTRIES). A concurrent double-load of
the same key is harmless because both results are equivalent.
"""

import hashlib
import json
import logging

from yt_index.dictionaries.config import DictionariesConfig
from yt_index.dictionaries.schemas import Dictionary, DictionarySource

logger = logging.getLogger(__name__)


def source_cache_key(source: DictionarySource, transcript: str | None = None) -> str:
    """
    Compute the canonical cache key for a source.

    The key is a sha256 over the source's canonical JSON description. For
    sources whose terms depend on the transcript, the transcript hash is
    part of the key.

    Args:
        source: Parsed dictionary source.
        transcript: Transcript text, used for transcript-dependent sources.

    Returns:
        Hex digest string.
    """
    description = source.model_dump(mode="json")
    if source.requires_transcript:
        description["transcript"] = hashlib.sha256(
            (transcript or "").encode("utf-8")
        ).hexdigest()
    canonical = json.dumps(description, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class DictionaryCache:
    """
    Bounded mapping from source cache key to loaded Dictionary.

    Entries are never replaced or mutated. When the cache is full the oldest
    entry is evicted.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is None:
            max_entries = DictionariesConfig().cache_max_entries
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: dict[str, Dictionary] = {}

    def get(self, key: str) -> Dictionary | None:
        return self._entries.get(key)

    def put(self, key: str, dictionary: Dictionary) -> None:
        if key in self._entries:
            return
        while len(self._entries) >= self.max_entries:
            # dicts keep insertion order, so the first key is the oldest
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug(f"Evicted cached dictionary {oldest[:12]}")
        self._entries[key] = dictionary
        logger.debug(f"Cached dictionary {dictionary.name!r} ({len(dictionary)} terms)")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
