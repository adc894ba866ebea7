"""Test suite for the handlers-module."""

import pytest
from data_plumber_http.settings import Responses

from kv_service.services import handlers


@pytest.mark.parametrize(
    ("json", "status"),
    [
        ({"key": "value"}, 400),
        ({}, Responses().GOOD.status),
    ],
    ids=["no-args", "args"]
)
def test_no_args_handler(json, status):
    "Test `no_args_handler`."

    output = handlers.no_args_handler.run(json=json)

    assert output.last_status == status


@pytest.mark.parametrize(
    ("json", "status"),
    (pytest_args := [
        ({}, 400),
        ({"key": "a"}, 400),
        ({"value": "1"}, 400),
        ({"key": "", "value": "1"}, 400),
        ({"key": "a", "value": ""}, 400),
        ({"key": "a", "value": "1"}, Responses().GOOD.status),
        ({"key": "a", "value": "1", "other": ""}, Responses().GOOD.status),
    ]),
    ids=[f"stage {i+1}" for i in range(len(pytest_args))]
)
def test_store_handler(json, status):
    "Test `store_handler`."

    output = handlers.store_handler.run(json=json)

    assert output.last_status == status
    if status == Responses().GOOD.status:
        assert output.data.value == {"key": "a", "value": "1"}


@pytest.mark.parametrize(
    ("json", "status"),
    (pytest_args := [
        ({}, 400),
        ({"key": ""}, 400),
        ({"key": "a"}, Responses().GOOD.status),
    ]),
    ids=[f"stage {i+1}" for i in range(len(pytest_args))]
)
def test_retrieve_handler(json, status):
    "Test `retrieve_handler`."

    output = handlers.retrieve_handler.run(json=json)

    assert output.last_status == status


def test_non_empty_string():
    "Test `make` of `NonEmptyString`."

    assert handlers.NonEmptyString().make("", "loc")[2] == 400
    assert handlers.NonEmptyString().make("a", "loc") == (
        "a", Responses().GOOD.msg, Responses().GOOD.status
    )
    assert (
        handlers.NonEmptyString(pattern=r"[a-z]+").make("A", "loc")[2]
        == Responses().BAD_VALUE.status
    )
