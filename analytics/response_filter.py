"""
Response Filter
===============

Projects the fields chosen in the dashboard's multi-select out of a
ClassificationResult. is_success and user_id are always kept.
"""

from typing import Any, Callable, Dict, Iterable, Union

from models.response_models import ClassificationResult, FieldName

FIELD_ACCESSORS: Dict[FieldName, Callable[[ClassificationResult], Any]] = {
    FieldName.NUMBERS: lambda result: result.numbers,
    FieldName.ALPHABETS: lambda result: result.alphabets,
    FieldName.HIGHEST_ALPHABET: lambda result: result.highest_alphabet,
}


def filter_response(result: ClassificationResult,
                    selected_fields: Iterable[Union[FieldName, str]]) -> Dict[str, Any]:
    """
    Builds the partial response shown to the user.
    Selected fields appear in FieldName order whatever order they were picked in;
    a field whose value is None is skipped, empty lists are kept.
    """
    # FieldName("unknown") raises ValueError
    selected = {FieldName(name) for name in selected_fields}

    filtered = {
        "is_success": result.is_success,
        "user_id": result.user_id,
    }

    for name, accessor in FIELD_ACCESSORS.items():
        if name not in selected:
            continue
        value = accessor(result)
        if value is not None:
            filtered[name.value] = value

    return filtered
