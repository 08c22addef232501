"""Read and write workflow files as YAML."""

import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from sample_api.exceptions import WorkflowNotFoundError, WorkflowParseError
from sample_api.workflow.models import Workflow

# Canonical top-level order used by the hosting platform's documentation
_TOP_LEVEL_ORDER = ("name", "on", "env", "permissions", "concurrency", "jobs")


class _WorkflowDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks and never emits anchors."""

    def ignore_aliases(self, data):
        return True


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.Node:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_WorkflowDumper.add_representer(str, _represent_str)


def dump_workflow(workflow: Workflow) -> str:
    """Serialize a workflow to YAML text, omitting unset fields."""
    data = workflow.model_dump(by_alias=True, exclude_none=True)
    ordered = {key: data.pop(key) for key in _TOP_LEVEL_ORDER if key in data}
    ordered.update(data)

    # Events listed without filters are written as empty mappings
    ordered["on"] = {event: (spec if spec is not None else {}) for event, spec in workflow.on.items()}

    text = yaml.dump(ordered, Dumper=_WorkflowDumper, sort_keys=False, default_flow_style=False, width=120)
    # SafeDumper quotes "on" because YAML 1.1 reads it as a boolean
    return re.sub(r"^'on':", "on:", text, count=1, flags=re.MULTILINE)


def _normalize_document(data: dict[Any, Any]) -> dict[Any, Any]:
    # YAML 1.1 loads the bare key "on" as True
    if True in data and "on" not in data:
        data["on"] = data.pop(True)
    return data


def parse_workflow(text: str, source: str | Path = "<string>") -> Workflow:
    """Parse workflow YAML text.

    Raises:
        WorkflowParseError: If the text is not YAML or not a valid workflow.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WorkflowParseError(source, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise WorkflowParseError(source, "top level must be a mapping")

    try:
        return Workflow.model_validate(_normalize_document(data))
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise WorkflowParseError(source, problems) from e


def load_workflow(path: str | Path) -> Workflow:
    """Load a workflow file.

    Raises:
        WorkflowNotFoundError: If the file does not exist.
        WorkflowParseError: If the file is not a valid workflow.
    """
    path = Path(path)
    if not path.is_file():
        raise WorkflowNotFoundError(path)

    logger.debug(f"Loading workflow from {path}")
    return parse_workflow(path.read_text(encoding="utf-8"), source=path)


def write_workflow(workflow: Workflow, path: str | Path) -> Path:
    """Write a workflow to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_workflow(workflow), encoding="utf-8")
    logger.info(f"Wrote workflow to {path}")
    return path
