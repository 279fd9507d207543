"""Normalization of GELF additional fields.

GELF requires every field beyond the fixed ones to carry a leading
underscore, and servers drop ``_id`` because it would clash with the
storage backend's own identifier.
"""

FIELD_PREFIX = "_"

# Replacement for keys that would otherwise become "_id"
_RESERVED_ID_REPLACEMENT = "id_"


def normalize_field_key(key: object) -> str | None:
    """Return the additional-field name for a property key.

    Args:
        key: Property key. Non-string keys cannot be named and are skipped.

    Returns:
        The underscore-prefixed field name, or None if the key is unusable.
    """
    if not isinstance(key, str):
        return None
    if key.lower() in ("id", "_id"):
        key = _RESERVED_ID_REPLACEMENT
    if not key.startswith(FIELD_PREFIX):
        key = FIELD_PREFIX + key
    return key


def field_value(value: object) -> str:
    """Coerce a property value to the string stored in the record."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def add_additional_field(fields: dict[str, str], key: object, value: object) -> None:
    """Normalize a key/value pair and merge it into an additional-field bag.

    Keys are unique case-insensitively: a later key replaces any earlier key
    that differs only by case, taking its spelling and value.

    Args:
        fields: The bag to update in place.
        key: Property key.
        value: Property value.
    """
    name = normalize_field_key(key)
    if name is None:
        return

    folded = name.casefold()
    for existing in [k for k in fields if k.casefold() == folded]:
        del fields[existing]
    fields[name] = field_value(value)
