"""
Request Parser Module
=====================

This module validates the raw JSON typed into the dashboard and extracts the
token list from its "data" field.
"""

import json
from typing import List, Optional

from models.errors import InputError, InvalidJsonError, InvalidShapeError


def parse_request(raw_text: str) -> List[str]:
    """
    Parses '{"data": [...]}' into the list of tokens.
    Raises InvalidJsonError for unparseable text and InvalidShapeError when
    "data" is missing, is not an array, or holds non-string items.
    """
    try:
        parsed = json.loads(raw_text)
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidJsonError() from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("data"), list):
        raise InvalidShapeError()

    tokens = parsed["data"]
    if not all(isinstance(token, str) for token in tokens):
        raise InvalidShapeError('"data" must be an array of strings')

    return tokens


def validate_request(raw_text: str) -> Optional[List[str]]:
    """Returns the tokens, or None when the text would be rejected."""
    try:
        return parse_request(raw_text)
    except InputError:
        return None
