"""Reading and writing project envelopes as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ropscript.project.model import ProjectFile, ProjectFormatError

LOGGER = logging.getLogger("ropscript.project")


def project_from_json(text: str) -> ProjectFile:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProjectFormatError(f"invalid project JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise ProjectFormatError("project JSON must be an object")
    return ProjectFile.from_dict(data)


def project_to_json(project: ProjectFile) -> str:
    return json.dumps(project.to_dict(), indent=2, ensure_ascii=False)


def load_project(path: str | Path) -> ProjectFile:
    project_path = Path(path)
    decoded = project_path.read_bytes().decode("utf-8")
    # Strip a UTF-8 BOM written by some editors.
    text = decoded[1:] if decoded.startswith("\ufeff") else decoded
    project = project_from_json(text)
    LOGGER.debug(
        "loaded project %s (format %d, %d gadgets)",
        project_path,
        project.format_version,
        len(project.gadgets),
    )
    return project
