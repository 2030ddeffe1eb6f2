import re

from gdocs.sdk.exceptions import InvalidRangeError

# Google Doc IDs are 25+ characters of letters, digits, dashes and underscores.
# The same run is found inside sharing URLs, so no URL parsing is needed.
DOCUMENT_ID_REGEX = re.compile(r'[-\w]{25,}', re.ASCII)


def normalize_document_id(reference: str) -> str:
    """
    Extract a bare document ID from a reference such as a sharing URL.

    Args:
        reference: A document ID or any string embedding one.

    Returns:
        The first 25+ character ID run, or the reference unchanged if none.
    """
    match = DOCUMENT_ID_REGEX.search(reference)
    return match.group(0) if match else reference


def validate_position(name: str, value) -> None:
    """
    Validates an optional document index.

    Raises:
        InvalidRangeError: If the value is present but not a non-negative integer.
    """
    if value is None:
        return
    # bool is an int subclass; True is not a position
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRangeError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidRangeError(f"{name} must not be negative, got {value}.")


def validate_edit_range(start_position, end_position) -> None:
    """
    Validates the positions of an edit request.

    Raises:
        InvalidRangeError: If end is given without start, or end precedes start.
    """
    validate_position("startPosition", start_position)
    validate_position("endPosition", end_position)

    if end_position is not None and start_position is None:
        raise InvalidRangeError("endPosition requires startPosition.")
    if end_position is not None and end_position < start_position:
        raise InvalidRangeError(
            f"endPosition ({end_position}) must not be less than startPosition ({start_position})."
        )
