"""Checks that a workflow does what this project's CI needs.

The hosting platform is the authority on the format itself; here we only
verify the pipeline shape: triggered on code changes, and every job checks
out the code, sets up Python, installs dependencies and then runs tests.
"""

import itertools
import re
from typing import Any

from loguru import logger

from sample_api.constants import WORKFLOW_TRIGGERS
from sample_api.workflow.models import Job, Step, Workflow

# A test command must start a line, so "pip install pytest" is not a test step
_TEST_COMMAND_RE = re.compile(
    r"^\s*(?:pytest\b|python3?\s+-m\s+(?:pytest|unittest)\b|python3?\s+manage\.py\s+test\b)",
    re.MULTILINE,
)
_INSTALL_COMMAND_RE = re.compile(r"\bpip\s+install\b")
_MATRIX_EXPR_RE = re.compile(r"\$\{\{\s*matrix\.([\w-]+)\s*\}\}")


def _is_checkout(step: Step) -> bool:
    return bool(step.uses and step.uses.startswith("actions/checkout"))


def _is_setup_python(step: Step) -> bool:
    return bool(step.uses and step.uses.startswith("actions/setup-python"))


def _is_install(step: Step) -> bool:
    return bool(step.run and _INSTALL_COMMAND_RE.search(step.run))


def _is_test(step: Step) -> bool:
    return bool(step.run and _TEST_COMMAND_RE.search(step.run))


def _first_index(steps: list[Step], predicate) -> int | None:
    return next((i for i, step in enumerate(steps) if predicate(step)), None)


def _validate_job(job_id: str, job: Job) -> list[str]:
    problems = []
    if job.uses:
        # The called workflow's steps live in another file
        return []
    if not job.steps:
        return [f"job '{job_id}' has no steps"]

    checkout = _first_index(job.steps, _is_checkout)
    setup = _first_index(job.steps, _is_setup_python)
    install = _first_index(job.steps, _is_install)
    test = _first_index(job.steps, _is_test)

    if checkout is None:
        problems.append(f"job '{job_id}' does not check out the repository")
    if setup is None:
        problems.append(f"job '{job_id}' does not set up Python")
    if install is None:
        problems.append(f"job '{job_id}' does not install dependencies")
    if test is None:
        problems.append(f"job '{job_id}' does not run the tests")

    if test is not None:
        if install is not None and install > test:
            problems.append(f"job '{job_id}' installs dependencies after running the tests")
        if checkout is not None and checkout > test:
            problems.append(f"job '{job_id}' checks out the repository after running the tests")
    return problems


def validate_workflow(workflow: Workflow) -> list[str]:
    """Return a list of problems; an empty list means the workflow is usable."""
    problems = []

    if not any(event in workflow.on for event in WORKFLOW_TRIGGERS):
        problems.append(f"workflow is not triggered by any of: {', '.join(WORKFLOW_TRIGGERS)}")

    if not workflow.jobs:
        problems.append("workflow defines no jobs")

    for job_id, job in workflow.jobs.items():
        problems.extend(_validate_job(job_id, job))

    if workflow.jobs and all(job.uses for job in workflow.jobs.values()):
        called = ", ".join(sorted({job.uses for job in workflow.jobs.values()}))
        problems.append(f"workflow only calls reusable workflows ({called}); their steps cannot be checked here")

    return problems


def _matches(combo: dict[str, Any], entry: dict[str, Any]) -> bool:
    return all(combo.get(key) == value for key, value in entry.items())


def matrix_combinations(matrix: dict[str, Any]) -> list[dict[str, Any]]:
    """Expand a matrix into its job combinations.

    ``exclude`` entries drop every combination they match. An ``include``
    entry extends the combinations it matches on the base keys (all of them
    when it names none), or is added as a combination of its own when it
    matches none.
    """
    base_keys = [key for key in matrix if key not in ("include", "exclude")]
    value_lists = [matrix[key] if isinstance(matrix[key], list) else [matrix[key]] for key in base_keys]
    combos = [dict(zip(base_keys, values, strict=True)) for values in itertools.product(*value_lists)] if base_keys else []

    for entry in matrix.get("exclude") or []:
        combos = [combo for combo in combos if not _matches(combo, entry)]

    for entry in matrix.get("include") or []:
        base_part = {key: value for key, value in entry.items() if key in base_keys}
        # An entry without base keys matches, and extends, every combination
        matched = [combo for combo in combos if _matches(combo, base_part)]
        if matched:
            for combo in matched:
                combo.update(entry)
        else:
            combos.append(dict(entry))

    return combos


def _format_value(value: Any) -> str:
    # Expressions render booleans in lower case
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _check_name(job_id: str, job: Job, combo: dict[str, Any]) -> str:
    name = job.name or job_id
    if _MATRIX_EXPR_RE.search(name):
        # An explicit matrix expression in the name replaces the suffix
        return _MATRIX_EXPR_RE.sub(lambda m: _format_value(combo.get(m.group(1), "")), name)
    if not combo:
        return name
    return f"{name} ({', '.join(_format_value(value) for value in combo.values())})"


def required_status_checks(workflow: Workflow) -> list[str]:
    """Names under which the hosting platform reports this workflow's job runs.

    These are the checks a branch protection rule should require before
    merging into the default branch. Jobs that call a reusable workflow
    are skipped, since the checks they report are named in the called file.
    """
    names = []
    for job_id, job in workflow.jobs.items():
        if job.uses:
            # Reported as "<caller> / <called job>"; the called jobs are defined elsewhere
            logger.warning(f"Skipping job '{job_id}': its checks come from {job.uses}")
            continue
        combos = matrix_combinations(job.strategy.matrix) if job.strategy else []
        for combo in combos or [{}]:
            names.append(_check_name(job_id, job, combo))
    return names
