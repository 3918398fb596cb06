"""Parsers between RWPM JSON and webpub subject models."""

from .href import HrefNormalizer, href_normalizer_for_base, identity_href_normalizer
from .links import decode_link, decode_links, encode_link, encode_links
from .localized import decode_localized_string, encode_localized_string
from .subjects import decode_subject, decode_subjects, encode_subject, encode_subjects

__all__ = [
    # Hrefs
    "HrefNormalizer",
    "identity_href_normalizer",
    "href_normalizer_for_base",
    # Localized strings
    "decode_localized_string",
    "encode_localized_string",
    # Links
    "decode_link",
    "decode_links",
    "encode_link",
    "encode_links",
    # Subjects
    "decode_subject",
    "decode_subjects",
    "encode_subject",
    "encode_subjects",
]
