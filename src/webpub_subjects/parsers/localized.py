"""Localized string parsing (plain string or language -> string map)."""

from typing import Any, Optional, Union

from ..config import UNDEFINED_LANGUAGE
from ..models import JsonKind, LocalizedString, json_kind
from ..parse_warnings import JsonWarning, Severity, WarningKind, WarningLogger


def decode_localized_string(json: Any, warnings: Optional[WarningLogger] = None) -> Optional[LocalizedString]:
    """
    Parse a LocalizedString from its RWPM JSON representation.

    Accepts:
    - A plain string: "Fiction" -> translation of undetermined language
    - A language map: {"en": "Fiction", "fr": "Romans"}; the "und" key maps to
      the undetermined translation

    Args:
        json: Parsed JSON value
        warnings: Optional sink for non-fatal issues

    Returns:
        LocalizedString, or None if no translation could be read
    """
    kind = json_kind(json)
    if kind is JsonKind.NULL:
        return None
    if kind is JsonKind.STRING:
        return LocalizedString.of(json)
    if kind is JsonKind.OBJECT:
        return _decode_translations(json, warnings)

    if warnings is not None:
        warnings.log(JsonWarning(WarningKind.MALFORMED_VALUE, LocalizedString, "invalid localized string", data=json))
    return None


def _decode_translations(json: dict, warnings: Optional[WarningLogger]) -> Optional[LocalizedString]:
    translations: dict[Optional[str], str] = {}
    for language, value in json.items():
        if json_kind(value) is not JsonKind.STRING:
            if warnings is not None:
                warnings.log(
                    JsonWarning(
                        WarningKind.MALFORMED_VALUE,
                        LocalizedString,
                        f"invalid translation for language [{language}]",
                        data=value,
                        severity=Severity.MODERATE,
                    )
                )
            continue
        translations[None if language == UNDEFINED_LANGUAGE else language] = value

    if not translations:
        return None
    return LocalizedString(translations)


def encode_localized_string(value: LocalizedString) -> Union[str, dict[str, str]]:
    """
    Serialize a LocalizedString to its RWPM JSON representation.

    A single translation of undetermined language is written as a plain
    string, anything else as a language map.
    """
    translations = value.translations
    if len(translations) == 1 and None in translations:
        return translations[None]
    return {language or UNDEFINED_LANGUAGE: string for language, string in translations.items()}
