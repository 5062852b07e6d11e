"""
Token Classification Module
===========================

This module sorts the submitted tokens into numbers and single letters and
picks the highest letter. It is a pure function of its input; identity
fields come from the injected UserInfo.
"""

import logging
import math
import re
from typing import List, Sequence

from models.errors import InvalidInputError
from models.response_models import ClassificationResult, UserInfo

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
ALPHABET_PATTERN = re.compile(r"[A-Za-z]")


def is_number(token: str) -> bool:
    """
    True for signed integer or decimal literals with a finite value.
    Surrounding whitespace is ignored; "", "NaN", "Infinity" and "0x1F" are not numbers.
    """
    candidate = token.strip()
    if not NUMBER_PATTERN.fullmatch(candidate):
        return False
    # "1e999" is well formed but overflows to inf
    return math.isfinite(float(candidate))


def is_alphabet(token: str) -> bool:
    return ALPHABET_PATTERN.fullmatch(token) is not None


def highest_alphabet(alphabets: List[str]) -> List[str]:
    """Returns the case-insensitive maximum as a one-element list, first occurrence on ties."""
    if not alphabets:
        return []
    return [max(alphabets, key=str.lower)]


def _validate_tokens(tokens) -> None:
    if isinstance(tokens, (str, bytes)) or not isinstance(tokens, Sequence):
        raise InvalidInputError()
    for token in tokens:
        if not isinstance(token, str):
            raise InvalidInputError(f"Token {token!r} is not a string")


def classify(tokens: Sequence[str], user_info: UserInfo) -> ClassificationResult:
    _validate_tokens(tokens)

    numbers = [token for token in tokens if is_number(token)]
    alphabets = [token for token in tokens if is_alphabet(token)]

    logger.debug("Classified %d tokens: %d numbers, %d alphabets, %d dropped",
                 len(tokens), len(numbers), len(alphabets),
                 len(tokens) - len(numbers) - len(alphabets))

    return ClassificationResult(
        user_id=user_info.user_id,
        email=user_info.email,
        roll_number=user_info.roll_number,
        numbers=numbers,
        alphabets=alphabets,
        highest_alphabet=highest_alphabet(alphabets),
    )
