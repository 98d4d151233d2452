"""
Keyword-boost dictionaries.

Dictionaries are named, weighted sets of lowercase terms used to raise the
score of matching keywords. They are loaded from inline lists, files, URLs,
JSON APIs or dynamic lookups keyed by transcript content.

Components:
- DictionariesConfig: Configuration for loading and lookups
- Dictionary / DictionaryConfig: Loaded dictionary and source list
- DictionaryCache: Explicit cache of loaded dictionaries
- DictionaryLoader: Loads sources, isolating failures per source
- DICTIONARY_CONFIGS: Preset configurations by topic
"""

from yt_index.dictionaries.schemas import (
    DYNAMIC_SOURCE_NAMES,
    Dictionary,
    DictionaryConfig,
    DictionarySource,
    DictionarySourceError,
    parse_dictionary_source,
)
from yt_index.dictionaries.cache import DictionaryCache, source_cache_key
from yt_index.dictionaries.config import DictionariesConfig
from yt_index.dictionaries.loader import DictionaryLoader
from yt_index.dictionaries.presets import DICTIONARY_CONFIGS, get_preset

__all__ = [
    "DYNAMIC_SOURCE_NAMES",
    "DICTIONARY_CONFIGS",
    "DictionariesConfig",
    "Dictionary",
    "DictionaryCache",
    "DictionaryConfig",
    "DictionaryLoader",
    "DictionarySource",
    "DictionarySourceError",
    "get_preset",
    "parse_dictionary_source",
    "source_cache_key",
]
