import json
import logging
import pytest
from core.errors import InputParseError
from schemas.generate import BuildParamField, BuildParams, REQUIRED_BUILD_PARAM_FIELDS
from services.input_service import (
    get_build_params,
    get_missing_input_message,
    parse_as_json,
    parse_bool_input,
    retrieve_inputs,
    split_task_ids,
    string_has_content,
    validate_build_params,
)
from services.request_builder import convert_object_to_json


def _complete_params(**overrides):
    data = {
        "containerId": "PLAY000826",
        "releaseId": "PLAY-REL-1",
        "taskLevel": "DEV1",
        "taskIds": ["7E3A5B274D24", "7E3A5B274EFA"],
    }
    data.update(overrides)
    return BuildParams.model_validate(data)


def test_retrieve_inputs_fills_undefined_with_empty_string():
    inputs = retrieve_inputs(["ces_url", "srid", "level"], {"ces_url": "http://ces:2020", "level": None})
    assert inputs == {"ces_url": "http://ces:2020", "srid": "", "level": ""}


def test_retrieve_inputs_reads_action_environment(monkeypatch):
    monkeypatch.setenv("INPUT_CES_URL", "  http://ces:2020/compuware  ")
    monkeypatch.delenv("INPUT_SRID", raising=False)
    inputs = retrieve_inputs(["ces_url", "srid"])
    assert inputs == {"ces_url": "http://ces:2020/compuware", "srid": ""}


def test_string_has_content():
    assert string_has_content("x")
    assert string_has_content(["a"])
    assert not string_has_content("")
    assert not string_has_content(None)
    assert not string_has_content([])


def test_parse_as_json_empty_is_absent():
    assert parse_as_json("") is None
    assert parse_as_json(None) is None


def test_parse_as_json_invalid_raises_parse_error():
    with pytest.raises(InputParseError):
        parse_as_json("{containerId: ")


def test_parse_as_json_round_trips_serialized_object():
    obj = {"containerId": "A1", "taskIds": ["1", "2"], "nested": {"n": 1, "flag": False, "none": None}}
    assert parse_as_json(convert_object_to_json(obj)) == obj


def test_parse_bool_input_only_accepts_literal_true():
    assert parse_bool_input("true") is True
    for value in ("True", "TRUE", "yes", "1", "", None, "false"):
        assert parse_bool_input(value) is False


def test_split_task_ids():
    assert split_task_ids("A, B,,C ") == ["A", "B", "C"]
    assert split_task_ids("") == []


def test_validate_build_params_valid():
    assert validate_build_params(_complete_params()) is True


def test_validate_build_params_absent():
    assert validate_build_params(None) is False


@pytest.mark.parametrize(
    "field, alias, empty",
    [
        (BuildParamField.CONTAINER_ID, "containerId", ""),
        (BuildParamField.RELEASE_ID, "releaseId", ""),
        (BuildParamField.TASK_LEVEL, "taskLevel", ""),
        (BuildParamField.TASK_IDS, "taskIds", []),
    ],
)
def test_validate_build_params_reports_single_missing_field(caplog, field, alias, empty):
    caplog.set_level(logging.ERROR)
    params = _complete_params(**{alias: empty})
    assert validate_build_params(params) is False
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [get_missing_input_message(field)]


def test_validate_build_params_reports_every_missing_field(caplog):
    caplog.set_level(logging.ERROR)
    assert validate_build_params(BuildParams()) is False
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Missing input: an assignment ID must be specified.",
        "Missing input: a release ID must be specified.",
        "Missing input: a level must be specified.",
        "Missing input: a list of task IDs must be specified.",
    ]
    assert len(messages) == len(REQUIRED_BUILD_PARAM_FIELDS)


def test_validate_build_params_respects_required_fields(caplog):
    caplog.set_level(logging.ERROR)
    params = _complete_params(releaseId="")
    required = [BuildParamField.CONTAINER_ID, BuildParamField.TASK_LEVEL, BuildParamField.TASK_IDS]
    assert validate_build_params(params, required) is True
    assert caplog.records == []


def test_get_build_params_from_generate_automatically():
    inputs = {
        "generate_automatically": json.dumps(
            {
                "containerId": "PLAY000826",
                "releaseId": "REL1",
                "taskLevel": "DEV1",
                "taskIds": ["T1", "T2"],
                "setId": "ignored",
            }
        ),
        "assignment_id": "OTHER",
    }
    params = get_build_params(inputs)
    assert params.container_id == "PLAY000826"
    assert params.task_ids == ["T1", "T2"]


def test_get_build_params_from_individual_inputs():
    inputs = {"assignment_id": "PLAY000826", "release_id": "REL1", "level": "DEV1", "task_id": "T1,T2"}
    params = get_build_params(inputs)
    assert params == BuildParams(container_id="PLAY000826", release_id="REL1", task_level="DEV1", task_ids=["T1", "T2"])


def test_get_build_params_absent_when_nothing_given():
    assert get_build_params({"generate_automatically": "", "assignment_id": ""}) is None


def test_get_build_params_rejects_non_object_json():
    with pytest.raises(InputParseError):
        get_build_params({"generate_automatically": "[1, 2]"})
