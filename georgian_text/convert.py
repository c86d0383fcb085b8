"""Single entry point for converting Georgian text between representations."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

import voluptuous as vol

from .const import (
    CONF_CAPITALIZE_FIRST,
    CONF_MAX_LENGTH,
    DEFAULT_CAPITALIZE_FIRST,
    TARGET_CHOICES,
    TARGET_LATIN,
    TARGET_LEGACY,
    TARGET_UNICODE,
)
from .exceptions import InvalidOptionsError
from .legacy import to_legacy_byte_encoding, to_unicode
from .transliteration import transliterate_to_latin
from .validation import validate_text_input

_LOGGER = logging.getLogger(__name__)

ATTR_TARGET = "target"

CONVERT_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_TARGET): vol.In(TARGET_CHOICES),
        vol.Optional(CONF_CAPITALIZE_FIRST, default=DEFAULT_CAPITALIZE_FIRST): bool,
        vol.Optional(CONF_MAX_LENGTH, default=None): vol.Any(
            None, vol.All(int, vol.Range(min=1))
        ),
    }
)

_CONVERTERS: dict[str, Callable[[str, dict[str, Any]], str]] = {
    TARGET_LEGACY: lambda text, _: to_legacy_byte_encoding(text),
    TARGET_UNICODE: lambda text, _: to_unicode(text),
    TARGET_LATIN: lambda text, opts: transliterate_to_latin(text, opts[CONF_CAPITALIZE_FIRST]),
}


def validate_options(target: str, **options: Any) -> dict[str, Any]:
    """Validate conversion options and fill in defaults.

    Raises:
        InvalidOptionsError: If the target or any option is invalid
    """
    try:
        return CONVERT_SCHEMA({ATTR_TARGET: target, **options})  # type: ignore[no-any-return]
    except vol.Invalid as err:
        raise InvalidOptionsError(f"Invalid conversion options: {err}") from err


def convert(value: str | None, target: str, **options: Any) -> str | None:
    """Convert text to the given representation.

    Args:
        value: Text to convert.
        target: One of "legacy", "unicode" or "latin".
        **options: capitalize_first (latin only) and max_length (no limit
            unless given). The text itself is passed on unchanged.

    Returns:
        Converted text, or None if value is None.

    Raises:
        InvalidOptionsError: If the target or options are invalid.
        InvalidInputTypeError: If value is not a string.
        InputTooLongError: If max_length is given and value is longer.
    """
    opts = validate_options(target, **options)

    if value is None:
        return None

    text = validate_text_input(value, opts[CONF_MAX_LENGTH])
    _LOGGER.debug("Converting %d characters to %s", len(text), opts[ATTR_TARGET])
    return _CONVERTERS[opts[ATTR_TARGET]](text, opts)
