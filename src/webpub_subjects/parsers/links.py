"""Link parsing and serialization."""

from typing import Any, Iterable, Optional

from ..models import JsonKind, Link, json_kind
from ..parse_warnings import JsonWarning, WarningKind, WarningLogger
from .href import HrefNormalizer, identity_href_normalizer
from .utils import (
    opt_boolean,
    opt_positive_float,
    opt_positive_int,
    opt_string,
    opt_strings,
    parse_objects,
    put_if_not_empty,
    unique,
)


def decode_link(
    json: Any,
    normalize_href: HrefNormalizer = identity_href_normalizer,
    warnings: Optional[WarningLogger] = None,
) -> Optional[Link]:
    """
    Parse a Link from its RWPM JSON representation.

    The href of the link, and of its alternates and children recursively, is
    passed through normalize_href.

    Args:
        json: Parsed JSON value, expected to be an object
        normalize_href: Normalizer applied to every href
        warnings: Optional sink for non-fatal issues

    Returns:
        Link, or None if the value is not an object with a string "href"
    """
    href = opt_string(json, "href") if json_kind(json) is JsonKind.OBJECT else None
    if href is None:
        if warnings is not None:
            warnings.log(JsonWarning(WarningKind.MISSING_REQUIRED_FIELD, Link, "[href] is required", data=json))
        return None

    properties = json.get("properties")
    return Link(
        href=normalize_href(href),
        type=opt_string(json, "type"),
        templated=opt_boolean(json, "templated"),
        title=opt_string(json, "title"),
        rels=unique(opt_strings(json, "rel")),
        properties=properties if json_kind(properties) is JsonKind.OBJECT else {},
        height=opt_positive_int(json, "height"),
        width=opt_positive_int(json, "width"),
        bitrate=opt_positive_float(json, "bitrate"),
        duration=opt_positive_float(json, "duration"),
        languages=unique(opt_strings(json, "language")),
        alternates=decode_links(json.get("alternate"), normalize_href, warnings),
        children=decode_links(json.get("children"), normalize_href, warnings),
    )


def decode_links(
    json: Any,
    normalize_href: HrefNormalizer = identity_href_normalizer,
    warnings: Optional[WarningLogger] = None,
) -> list[Link]:
    """
    Parse a list of Link from a JSON array.

    Malformed entries are dropped; anything other than an array yields an
    empty list.
    """
    if json_kind(json) is not JsonKind.ARRAY:
        return []
    return parse_objects(json, lambda item: decode_link(item, normalize_href, warnings))


def encode_link(link: Link) -> dict:
    """Serialize a Link to its RWPM JSON representation."""
    json: dict[str, Any] = {"href": link.href}
    put_if_not_empty(json, "type", link.type)
    json["templated"] = link.templated
    put_if_not_empty(json, "title", link.title)
    put_if_not_empty(json, "rel", list(link.rels))
    put_if_not_empty(json, "properties", dict(link.properties))
    put_if_not_empty(json, "height", link.height)
    put_if_not_empty(json, "width", link.width)
    put_if_not_empty(json, "bitrate", link.bitrate)
    put_if_not_empty(json, "duration", link.duration)
    put_if_not_empty(json, "language", list(link.languages))
    put_if_not_empty(json, "alternate", encode_links(link.alternates))
    put_if_not_empty(json, "children", encode_links(link.children))
    return json


def encode_links(links: Iterable[Link]) -> list[dict]:
    return [encode_link(link) for link in links]
