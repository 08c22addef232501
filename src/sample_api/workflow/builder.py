"""Build the project's CI workflow from settings."""

from loguru import logger

from sample_api.constants import CHECKOUT_ACTION, DEFAULT_REQUIREMENTS_FILE, SETUP_PYTHON_ACTION, WORKFLOW_TRIGGERS
from sample_api.settings import Settings, get_settings
from sample_api.workflow.models import Job, Step, Strategy, Workflow

TEST_JOB_ID = "test"


def build_workflow(settings: Settings | None = None) -> Workflow:
    """Return the canonical CI workflow for this repository.

    Runs on every push and pull request against the default branch: check
    out the code, set up each Python version of the matrix, install the
    requirements and run the test suite.

    Raises:
        ValueError: If no Python versions are configured.
    """
    settings = settings or get_settings()
    versions = settings.python_version_list()
    if not versions:
        raise ValueError("At least one Python version is required for the CI matrix")

    steps = [
        Step(uses=CHECKOUT_ACTION),
        Step(
            name="Set up Python ${{ matrix.python-version }}",
            uses=SETUP_PYTHON_ACTION,
            with_={"python-version": "${{ matrix.python-version }}"},
        ),
        Step(
            name="Install dependencies",
            run=f"python -m pip install --upgrade pip\npip install -r {DEFAULT_REQUIREMENTS_FILE}\n",
        ),
        Step(name="Run tests", run="pytest"),
    ]

    workflow = Workflow(
        name="CI",
        on={event: {"branches": [settings.default_branch]} for event in WORKFLOW_TRIGGERS},
        jobs={
            TEST_JOB_ID: Job(
                runs_on="ubuntu-latest",
                strategy=Strategy(fail_fast=False, matrix={"python-version": versions}),
                steps=steps,
            )
        },
    )
    logger.debug(f"Built CI workflow for branch '{settings.default_branch}' on Python {', '.join(versions)}")
    return workflow
