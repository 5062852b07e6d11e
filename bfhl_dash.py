import logging
import os

from dashboard.ui import run_dashboard


def configure_logging():
    """Configures root logging once; Streamlit re-executes this script on every interaction."""
    log_level = getattr(logging, os.getenv("BFHL_LOG_LEVEL", "INFO").upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    for package in ("analytics", "dashboard", "intake"):
        logging.getLogger(package).setLevel(log_level)


if __name__ == "__main__":
    configure_logging()
    run_dashboard()
