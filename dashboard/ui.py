"""
UI
==

This module implements the dashboard UI.
"""

import plotly.express as px

from analytics.response_filter import filter_response
from analytics.token_stats import build_token_breakdown, summarize_categories
from dashboard.data_management import *
from intake.parser import validate_request
from models.response_models import FieldName

FILTER_OPTIONS = [f.value for f in FieldName]


def format_field(value):
    return FieldName(value).label


def initialize_session_state():
    """Initializes page config and session variables."""
    st.set_page_config(page_title="BFHL API Tester", layout="centered")

    if 'json_input' not in st.session_state:
        st.session_state.json_input = sample_input_text()
    if 'response' not in st.session_state:
        st.session_state.response = None
    if 'tokens' not in st.session_state:
        st.session_state.tokens = []


def render_sidebar(user_info):
    with st.sidebar:
        st.header("🪪 Identity")
        st.text(f"User ID: {user_info.user_id}")
        st.text(f"Email: {user_info.email}")
        st.text(f"Roll Number: {user_info.roll_number}")
        st.caption("Set BFHL_USER_NAME, BFHL_USER_DOB, BFHL_EMAIL and BFHL_ROLL_NUMBER to change.")


def render_input_form(user_info):
    st.title("</> BFHL API Tester")

    raw_text = st.text_area("JSON Input", key="json_input", height=160)
    st.caption('Input must be valid JSON with a "data" array. Example format shown by default.')

    is_valid = validate_request(raw_text) is not None
    if st.button("📨 Submit", type="primary", disabled=not is_valid):
        submit_request(raw_text, user_info)


def render_response(result):
    st.divider()
    selected = st.multiselect(
        "Filter Response",
        options=FILTER_OPTIONS,
        format_func=format_field,
        key="selected_fields"
    )

    st.subheader("Response")
    st.code(json.dumps(filter_response(result, selected), indent=2), language="json")


def render_token_breakdown(tokens):
    with st.expander("🔎 Token Breakdown", expanded=False):
        if not tokens:
            st.info("No tokens submitted.")
            return

        breakdown = build_token_breakdown(tokens)
        st.dataframe(breakdown, hide_index=True, width="stretch")

        counts = summarize_categories(breakdown)
        fig = px.bar(
            x=counts.index,
            y=counts.values,
            color=counts.index,
            color_discrete_map={
                "Number": "#4f46e5",
                "Alphabet": "#2ca02c",
                "Dropped": "#d62728"
            },
            labels={"x": "Category", "y": "Tokens"}
        )
        fig.update_layout(
            height=260,
            margin=dict(l=10, r=10, t=10, b=10),
            showlegend=False
        )
        st.plotly_chart(fig, width="stretch", key="token_breakdown_chart")


def run_dashboard():
    initialize_session_state()

    user_info = load_user_info()
    render_sidebar(user_info)
    render_input_form(user_info)

    if st.session_state.response is not None:
        render_response(st.session_state.response)
        render_token_breakdown(st.session_state.tokens)
