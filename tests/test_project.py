import json
from pathlib import Path

import pytest

from ropscript.gadgets import TagType
from ropscript.pipeline import compile_script
from ropscript.project import (
    FORMAT_VERSION,
    ProjectFile,
    ProjectFormatError,
    load_project,
    project_from_json,
    project_to_json,
)


def test_missing_fields_fall_back_to_defaults() -> None:
    project = ProjectFile.from_dict({})

    assert project.input == ""
    assert project.left_start_address == "E9E0"
    assert project.right_start_address == "D710"
    assert project.gadgets == ()
    assert project.format_version == FORMAT_VERSION


def test_empty_addresses_fall_back_to_defaults() -> None:
    project = ProjectFile.from_dict({"leftStartAddress": "", "rightStartAddress": None})

    assert project.left_start_address == "E9E0"
    assert project.right_start_address == "D710"


def test_reads_legacy_version_key() -> None:
    assert ProjectFile.from_dict({"ideVersion": 7}).format_version == 7


def test_parses_gadgets_and_tags() -> None:
    project = ProjectFile.from_dict(
        {
            "input": "#pop;",
            "gadgets": [
                {
                    "name": "pop",
                    "addr": "1ABCD",
                    "desc": "pop er0",
                    "tags": [{"name": "er0"}, {"name": "slow", "type": "warn"}, {"name": "x", "type": "odd"}],
                }
            ],
        }
    )

    gadget = project.gadgets[0]
    assert gadget.name == "pop"
    assert [tag.type for tag in gadget.tags] == [TagType.INFO, TagType.WARN, TagType.INFO]


def test_project_compiles_with_its_own_inputs() -> None:
    project = ProjectFile.from_dict(
        {
            "input": "#pop; <here>\n[here]",
            "rightStartAddress": "1000",
            "gadgets": [{"name": "pop", "addr": "1ABCD"}],
        }
    )

    result = compile_script(project.input, project.gadgets, options=project.assembler_options())

    assert result.output_bytes == bytes([0xCD, 0xAB, 0x01, 0x00, 0x04, 0x10])


def test_json_round_trip_preserves_fields() -> None:
    project = ProjectFile.from_dict(
        {
            "input": "AB",
            "leftStartAddress": "1000",
            "rightStartAddress": "2000",
            "gadgets": [{"name": "pop", "addr": "1ABCD", "desc": "", "tags": [{"name": "t", "type": "warn"}]}],
            "formatVersion": 10,
        }
    )

    assert project_from_json(project_to_json(project)) == project
    assert json.loads(project_to_json(project))["formatVersion"] == 10


@pytest.mark.parametrize("text", ["{not json", "[]", '{"gadgets": {}}', '{"formatVersion": "10"}'])
def test_invalid_envelopes_raise(text: str) -> None:
    with pytest.raises(ProjectFormatError):
        project_from_json(text)


def test_load_project_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "chain.rop"
    path.write_text("\ufeff" + json.dumps({"input": "AB"}), encoding="utf-8")

    project = load_project(path)

    assert project.input == "AB"
