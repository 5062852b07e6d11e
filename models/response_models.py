"""
Data Models for the BFHL Response
=================================

This module defines the data structures passed between the request parser,
the classifier, the response filter and the dashboard. All records are
implemented as dataclasses.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class UserInfo:
    name: str
    dob: str
    email: str
    roll_number: str

    @property
    def user_id(self) -> str:
        """Identity shown in every response, e.g. john_doe_17091999."""
        return f"{self.name}_{self.dob}"


@dataclass
class ClassificationResult:
    user_id: str
    email: str
    roll_number: str
    numbers: List[str] = field(default_factory=list)
    alphabets: List[str] = field(default_factory=list)
    highest_alphabet: List[str] = field(default_factory=list)
    is_success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Returns the response in its JSON field order."""
        data = asdict(self)
        return {
            "is_success": data["is_success"],
            "user_id": data["user_id"],
            "email": data["email"],
            "roll_number": data["roll_number"],
            "numbers": data["numbers"],
            "alphabets": data["alphabets"],
            "highest_alphabet": data["highest_alphabet"],
        }


class FieldName(str, Enum):
    NUMBERS = "numbers"
    ALPHABETS = "alphabets"
    HIGHEST_ALPHABET = "highest_alphabet"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]


FIELD_LABELS = {
    FieldName.NUMBERS: "Numbers",
    FieldName.ALPHABETS: "Alphabets",
    FieldName.HIGHEST_ALPHABET: "Highest Alphabet",
}
