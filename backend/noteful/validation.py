"""
Noteful Backend — Request Body Validation
==========================================

What:  Required-field and partial-update checks shared by the resource handlers.
Why:   The API validates field presence only; these helpers keep the rules
       (what counts as "missing", which keys an update may touch) in one place.

A value counts as missing when it is absent, null, or a blank string.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from noteful.exceptions import ValidationError

# Columns a PATCH may change, per entity. Anything else in the body is ignored.
FOLDER_UPDATABLE_FIELDS = ("name",)
NOTE_UPDATABLE_FIELDS = ("name", "folder_id", "content")


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(
    payload: Optional[Mapping[str, Any]],
    fields: Iterable[str],
    message: str,
) -> None:
    """
    Raises ValidationError for the first field in `fields` that is missing.

    `message` is formatted with `field=<name>`, e.g. "'{field}' is required".
    """
    payload = payload or {}
    for field in fields:
        if is_missing(payload.get(field)):
            raise ValidationError(message=message.format(field=field), field=field)


def pick_updates(
    payload: Optional[Mapping[str, Any]],
    allowed: Iterable[str],
    message: str,
) -> Dict[str, Any]:
    """
    Returns the allowed, supplied fields of a partial update.

    Raises:
        ValidationError: none of the allowed fields was supplied
    """
    payload = payload or {}
    updates = {
        field: payload[field]
        for field in allowed
        if field in payload and not is_missing(payload[field])
    }
    if not updates:
        raise ValidationError(message=message, context={"allowed_fields": list(allowed)})
    return updates
