"""
Token Breakdown Module
======================

This module turns a submitted token list into a per-token table for the
dashboard, including the tokens the classifier drops from the response.
"""

import pandas as pd
from typing import List

from analytics.classifier import is_alphabet, is_number

CATEGORIES = ["Number", "Alphabet", "Dropped"]


def categorize_token(token: str) -> str:
    if is_number(token):
        return "Number"
    if is_alphabet(token):
        return "Alphabet"
    return "Dropped"


def build_token_breakdown(tokens: List[str]) -> pd.DataFrame:
    """One row per token, in input order, with its 1-based position and category."""
    rows = [
        {"Position": idx + 1, "Token": token, "Category": categorize_token(token)}
        for idx, token in enumerate(tokens)
    ]
    return pd.DataFrame(rows, columns=["Position", "Token", "Category"])


def summarize_categories(breakdown: pd.DataFrame) -> pd.Series:
    """Counts tokens per category; every category is present, zero-filled."""
    counts = breakdown["Category"].value_counts()
    return counts.reindex(CATEGORIES, fill_value=0).astype(int)
