"""Subject parsing and serialization.

A subject arrives either as a bare string ("Horror") or as a full object:

    {"name": "Fiction", "sortAs": "fiction", "scheme": "http://example.org/schema",
     "code": "FIC", "links": [{"href": "/subjects/fiction"}]}

and a subject list as a single subject or an array of them. Decoding never
raises on malformed input: a subject without a usable name is skipped and a
warning is logged to the optional WarningLogger.
"""

from typing import Any, Iterable, Optional

from ..models import JsonKind, LocalizedString, Subject, json_kind
from ..parse_warnings import JsonWarning, WarningKind, WarningLogger
from .href import HrefNormalizer, identity_href_normalizer
from .links import decode_links, encode_links
from .localized import decode_localized_string, encode_localized_string
from .utils import opt_string, parse_objects


def decode_subject(
    json: Any,
    normalize_href: HrefNormalizer = identity_href_normalizer,
    warnings: Optional[WarningLogger] = None,
) -> Optional[Subject]:
    """
    Parse a Subject from its RWPM JSON representation.

    The hrefs of the subject links, and of their children recursively, are
    normalized with normalize_href.

    Args:
        json: Parsed JSON value (string, object, or anything else)
        normalize_href: Normalizer applied to every link href
        warnings: Optional sink for non-fatal issues

    Returns:
        Subject, or None if json is null or has no usable name
    """
    kind = json_kind(json)
    if kind is JsonKind.NULL:
        return None

    localized_name: Optional[LocalizedString] = None
    if kind is JsonKind.STRING:
        localized_name = decode_localized_string(json, warnings)
    elif kind is JsonKind.OBJECT:
        localized_name = decode_localized_string(json.get("name"), warnings)

    if localized_name is None:
        if warnings is not None:
            warnings.log(JsonWarning(WarningKind.MISSING_REQUIRED_FIELD, Subject, "[name] is required", data=json))
        return None

    if kind is not JsonKind.OBJECT:
        return Subject(localized_name)

    # Wrong-typed optional fields are dropped without a warning
    return Subject(
        localized_name=localized_name,
        sort_as=opt_string(json, "sortAs"),
        scheme=opt_string(json, "scheme"),
        code=opt_string(json, "code"),
        links=decode_links(json.get("links"), normalize_href, warnings),
    )


def decode_subjects(
    json: Any,
    normalize_href: HrefNormalizer = identity_href_normalizer,
    warnings: Optional[WarningLogger] = None,
) -> list[Subject]:
    """
    Parse a list of Subject from its RWPM JSON representation.

    Accepts a single subject (string or object) or an array of subjects.
    Subjects that can't be parsed are dropped, each logging its own warning;
    the order of the remaining ones is preserved. Any other JSON value yields
    an empty list without warning.
    """
    kind = json_kind(json)
    if kind in (JsonKind.STRING, JsonKind.OBJECT):
        return parse_objects([json], lambda item: decode_subject(item, normalize_href, warnings))
    if kind is JsonKind.ARRAY:
        return parse_objects(json, lambda item: decode_subject(item, normalize_href, warnings))
    return []


def encode_subject(subject: Subject) -> dict:
    """Serialize a Subject to its RWPM JSON representation."""
    json: dict[str, Any] = {"name": encode_localized_string(subject.localized_name)}
    if subject.sort_as is not None:
        json["sortAs"] = subject.sort_as
    if subject.scheme is not None:
        json["scheme"] = subject.scheme
    if subject.code is not None:
        json["code"] = subject.code
    if subject.links:
        json["links"] = encode_links(subject.links)
    return json


def encode_subjects(subjects: Iterable[Subject]) -> list[dict]:
    return [encode_subject(subject) for subject in subjects]
