"""Project envelope model and JSON loading."""

from ropscript.project.load import load_project, project_from_json, project_to_json
from ropscript.project.model import FORMAT_VERSION, ProjectFile, ProjectFormatError

__all__ = [
    "FORMAT_VERSION",
    "ProjectFile",
    "ProjectFormatError",
    "load_project",
    "project_from_json",
    "project_to_json",
]
