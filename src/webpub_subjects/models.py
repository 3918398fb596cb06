"""Data models and constants for web publication manifest subjects."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, TypedDict, get_origin, get_type_hints

from .config import FALLBACK_LANGUAGES, UNDEFINED_LANGUAGE


class JsonKind(str, Enum):
    """Kinds of parsed JSON values (as produced by the json module)."""

    NULL = "null"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    BOOLEAN = "boolean"


def json_kind(value: object) -> Optional[JsonKind]:
    """
    Classify a parsed JSON value.

    Booleans are checked before numbers since bool is a subclass of int.

    Returns:
        The matching JsonKind, or None for values json.loads never produces
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    return None


@dataclass(frozen=True)
class LocalizedString:
    """
    Text with one or more language-tagged translations.

    The None key holds the translation of undetermined language.
    """

    translations: dict[Optional[str], str] = field(default_factory=dict, hash=False)

    @classmethod
    def of(cls, value: str, language: Optional[str] = None) -> "LocalizedString":
        """Create a LocalizedString with a single translation."""
        return cls({language: value})

    def get(self, language: Optional[str] = None) -> Optional[str]:
        """
        Return the translation for a language, falling back to a default one.

        Fallback order: requested language, undetermined, "und", "en", then
        the first translation.
        """
        if language in self.translations:
            return self.translations[language]
        for fallback in (None, UNDEFINED_LANGUAGE, *FALLBACK_LANGUAGES):
            if fallback in self.translations:
                return self.translations[fallback]
        return next(iter(self.translations.values()), None)

    @property
    def string(self) -> str:
        """Default translation, or an empty string when there is none."""
        return self.get() or ""

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class Link:
    """A manifest link, possibly with alternates and nested children."""

    href: str
    type: Optional[str] = None
    templated: bool = False
    title: Optional[str] = None
    rels: tuple[str, ...] = ()
    properties: Mapping = field(default_factory=dict, hash=False)
    height: Optional[int] = None
    width: Optional[int] = None
    bitrate: Optional[float] = None
    duration: Optional[float] = None
    languages: tuple[str, ...] = ()
    alternates: tuple["Link", ...] = ()
    children: tuple["Link", ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable, store tuples so instances stay immutable
        for name in ("rels", "languages", "alternates", "children"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        # Read-only copy, so the caller's dict can't change the link
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True)
class Subject:
    """
    Subject (keyword or category) of a publication.

    See https://github.com/readium/webpub-manifest/tree/master/contexts/default#subjects

    Attributes:
        localized_name: Name of the subject; a plain string is wrapped as a
            translation of undetermined language
        sort_as: String a machine can sort
        scheme: Controlled vocabulary or authority (EPUB opf:authority)
        code: Scheme-specific term (EPUB opf:term)
        links: Links to retrieve similar publications for the subject
    """

    localized_name: LocalizedString
    sort_as: Optional[str] = None
    scheme: Optional[str] = None
    code: Optional[str] = None
    links: tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.localized_name, str):
            object.__setattr__(self, "localized_name", LocalizedString.of(self.localized_name))
        elif not isinstance(self.localized_name, LocalizedString):
            raise TypeError(f"Subject name must be a str or LocalizedString, got {type(self.localized_name).__name__}")
        object.__setattr__(self, "links", tuple(self.links))

    @property
    def name(self) -> str:
        """Default translation of the subject name."""
        return self.localized_name.string


class SubjectRecord(TypedDict, total=False):
    """
    Flat subject row produced by the manifest loader for tabular export.

    All fields are optional (total=False); list fields are joined with "|"
    by serialize_subject().
    """

    manifest: str  # Location the manifest was read from
    position: int  # Index of the subject in the manifest's subject list
    name: str  # Default translation
    sort_as: str | None
    scheme: str | None
    code: str | None
    languages: list[str]  # Languages of the name translations ("und" for undetermined)
    link_hrefs: list[str]  # Normalized hrefs of the subject links


# List fields derived from SubjectRecord type hints (joined with "|" for CSV export)
LIST_FIELDS = [field for field, type_hint in get_type_hints(SubjectRecord).items() if get_origin(type_hint) is list]


def make_subject_record(manifest: str, position: int, subject: Subject) -> SubjectRecord:
    """Flatten a Subject into a SubjectRecord."""
    return {
        "manifest": manifest,
        "position": position,
        "name": subject.name,
        "sort_as": subject.sort_as,
        "scheme": subject.scheme,
        "code": subject.code,
        "languages": [lang or UNDEFINED_LANGUAGE for lang in subject.localized_name.translations],
        "link_hrefs": [link.href for link in subject.links],
    }


def serialize_subject(record: SubjectRecord) -> dict:
    """
    Serialize a SubjectRecord for DataFrame/CSV export.

    Converts list fields to pipe-separated strings.

    Args:
        record: Subject record to serialize

    Returns:
        Dictionary ready for DataFrame conversion
    """
    result = {}

    for key, value in record.items():
        if key in LIST_FIELDS and isinstance(value, list):
            result[key] = "|".join(str(v) for v in value) if value else None
        else:
            result[key] = value

    return result
