"""Global constants for the sample API.

This module defines constants used throughout the application to avoid
hardcoded strings and make the codebase more maintainable.
"""

PONG = "pong"

# Workflow defaults
DEFAULT_WORKFLOW_PATH = ".github/workflows/ci.yml"
DEFAULT_REQUIREMENTS_FILE = "requirements.txt"
CHECKOUT_ACTION = "actions/checkout@v4"
SETUP_PYTHON_ACTION = "actions/setup-python@v5"
WORKFLOW_TRIGGERS = ("push", "pull_request")
