"""
Data Management
===============

This module handles identity configuration, submissions and the session
state that holds the last result.
"""
import json
import logging
import os
from typing import List, Tuple

import streamlit as st

from analytics.classifier import classify
from intake.parser import parse_request
from models.errors import InputError
from models.response_models import ClassificationResult, UserInfo

logger = logging.getLogger(__name__)

SAMPLE_INPUT = {"data": ["M", "1", "334", "4", "B"]}


def load_user_info() -> UserInfo:
    """Reads the identity fields from the environment."""
    return UserInfo(
        name=os.getenv("BFHL_USER_NAME", "john_doe"),
        dob=os.getenv("BFHL_USER_DOB", "17091999"),
        email=os.getenv("BFHL_EMAIL", "john@xyz.com"),
        roll_number=os.getenv("BFHL_ROLL_NUMBER", "ABCD123"),
    )


def sample_input_text() -> str:
    return json.dumps(SAMPLE_INPUT, indent=2)


def process_submission(raw_text: str, user_info: UserInfo) -> Tuple[List[str], ClassificationResult]:
    """Parses and classifies one submission. InputError propagates before classify runs."""
    tokens = parse_request(raw_text)
    return tokens, classify(tokens, user_info)


def submit_request(raw_text: str, user_info: UserInfo):
    """Runs a submission from the form and stores the outcome in the session."""
    try:
        tokens, result = process_submission(raw_text, user_info)
    except InputError as e:
        logger.error("Error: %s", e)
        clear_response()
        st.toast(str(e), icon="❌")
        return

    st.session_state.response = result
    st.session_state.tokens = tokens
    logger.info("Processed submission with %d tokens", len(tokens))
    st.toast("Data processed successfully!", icon="✅")


def clear_response():
    st.session_state.response = None
    st.session_state.tokens = []
