"""Schema definitions for keyword-boost dictionaries.

A dictionary source describes where boost terms come from. Sources form a
tagged union discriminated by ``type``:

- ``inline``: a fixed term list
- ``file``: a newline-delimited file of terms
- ``url``: a newline-delimited text document fetched over HTTP
- ``api``: a JSON endpoint queried with transcript-derived candidate terms
- ``urban_dictionary`` / ``wikipedia`` / ``wordnet`` / ``google_knowledge``:
  external lookups queried with transcript-derived candidate terms

Loading a source produces a Dictionary: a named, weighted, read-only set of
lowercase terms.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

DynamicSourceName = Literal["urban_dictionary", "wikipedia", "wordnet", "google_knowledge"]

DYNAMIC_SOURCE_NAMES: tuple[str, ...] = (
    "urban_dictionary",
    "wikipedia",
    "wordnet",
    "google_knowledge",
)


class DictionarySourceError(ValueError):
    """Raised when a dictionary source description is unknown or malformed."""


class _SourceBase(BaseModel):
    """Fields shared by every dictionary source."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    weight: float = Field(default=1.0, gt=0.0, le=10.0)
    name: str | None = None

    @property
    def requires_transcript(self) -> bool:
        """Whether loading this source depends on the transcript content."""
        return False


class InlineSource(_SourceBase):
    type: Literal["inline"] = "inline"
    terms: list[str]


class FileSource(_SourceBase):
    type: Literal["file"] = "file"
    path: Path


class UrlSource(_SourceBase):
    type: Literal["url"] = "url"
    url: str


class ApiSource(_SourceBase):
    """
    A JSON endpoint queried once per candidate term.

    The response is either a JSON list of strings or an object whose
    ``terms_field`` holds such a list.
    """

    type: Literal["api"] = "api"
    url: str
    query_param: str = "q"
    terms_field: str = "terms"
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def requires_transcript(self) -> bool:
        return True


class _DynamicSourceBase(_SourceBase):
    @property
    def requires_transcript(self) -> bool:
        return True


class UrbanDictionarySource(_DynamicSourceBase):
    type: Literal["urban_dictionary"] = "urban_dictionary"


class WikipediaSource(_DynamicSourceBase):
    type: Literal["wikipedia"] = "wikipedia"


class WordNetSource(_DynamicSourceBase):
    type: Literal["wordnet"] = "wordnet"


class GoogleKnowledgeSource(_DynamicSourceBase):
    type: Literal["google_knowledge"] = "google_knowledge"


DictionarySource = Annotated[
    Union[
        InlineSource,
        FileSource,
        UrlSource,
        ApiSource,
        UrbanDictionarySource,
        WikipediaSource,
        WordNetSource,
        GoogleKnowledgeSource,
    ],
    Field(discriminator="type"),
]

_SOURCE_ADAPTER: TypeAdapter[DictionarySource] = TypeAdapter(DictionarySource)


def parse_dictionary_source(entry: Any) -> DictionarySource:
    """
    Parse one dictionary source description.

    Args:
        entry: An already-constructed source model or a mapping with a
            ``type`` key.

    Returns:
        The parsed source.

    Raises:
        DictionarySourceError: If the type is unknown or fields are invalid.
    """
    if isinstance(entry, _SourceBase):
        return entry  # type: ignore[return-value]

    try:
        return _SOURCE_ADAPTER.validate_python(entry)
    except ValidationError as e:
        source_type = entry.get("type") if isinstance(entry, dict) else type(entry).__name__
        raise DictionarySourceError(
            f"Invalid dictionary source ({source_type!r}): {e.error_count()} validation error(s)"
        ) from e


def make_dynamic_source(source_name: str, weight: float = 1.0) -> DictionarySource:
    """
    Build a dynamic source from its name.

    Raises:
        DictionarySourceError: If source_name is not a dynamic source.
    """
    if source_name not in DYNAMIC_SOURCE_NAMES:
        raise DictionarySourceError(f"Unknown dynamic dictionary source: {source_name!r}")
    return parse_dictionary_source({"type": source_name, "weight": weight})


@dataclass
class DictionaryConfig:
    """
    A set of dictionary sources to load for one extraction call.

    Entries may be parsed source models or raw mappings; raw mappings are
    parsed one at a time during loading so that a single bad entry does not
    prevent the others from loading.

    Example:
        >>> config = DictionaryConfig(dictionaries=[
        ...     {"type": "inline", "terms": ["react", "hooks"], "weight": 1.5},
        ...     {"type": "file", "path": "terms/ml.txt"},
        ... ])
    """

    dictionaries: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Dictionary:
    """
    A named, weighted set of lowercase boost terms.

    Attributes:
        name: Dictionary name, reported in keyword sources and dictionaries_used.
        terms: Lowercase terms (empty strings removed).
        weight: Positive boost weight.
    """

    name: str
    terms: frozenset[str]
    weight: float = 1.0

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise DictionarySourceError(f"Dictionary weight must be positive, got {self.weight}")

    @classmethod
    def from_terms(cls, name: str, terms: Any, weight: float = 1.0) -> "Dictionary":
        """Build a dictionary, normalizing terms to stripped lowercase."""
        normalized = frozenset(
            term.strip().lower() for term in terms if term and term.strip()
        )
        return cls(name=name, terms=normalized, weight=weight)

    def contains(self, word: str) -> bool:
        """Check whether a word (any case) is one of the terms."""
        return word.lower() in self.terms

    def __len__(self) -> int:
        return len(self.terms)

    def to_dict(self) -> dict[str, Any]:
        """Convert dictionary to a JSON-friendly summary."""
        return {
            "name": self.name,
            "weight": self.weight,
            "term_count": len(self.terms),
        }
