"""CI workflow description: model, builder, YAML I/O and validation."""

from sample_api.workflow.builder import build_workflow
from sample_api.workflow.io import dump_workflow, load_workflow
from sample_api.workflow.models import Job, Step, Strategy, Workflow
from sample_api.workflow.validator import required_status_checks, validate_workflow

__all__ = [
    "Job",
    "Step",
    "Strategy",
    "Workflow",
    "build_workflow",
    "dump_workflow",
    "load_workflow",
    "required_status_checks",
    "validate_workflow",
]
