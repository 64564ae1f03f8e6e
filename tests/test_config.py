"""Tests for StoreConfig validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from confstore.config import StoreConfig
from confstore.errors import ApplicationNameError, StoreError


def test_application_name_is_stripped():
    assert StoreConfig(application_name="  demo ").application_name == "demo"


@pytest.mark.parametrize("name", ["", "  ", "team/app", "team\\app"])
def test_invalid_application_name_is_rejected(name):
    with pytest.raises(ApplicationNameError) as excinfo:
        StoreConfig.for_application(name)

    assert isinstance(excinfo.value, StoreError)
    assert isinstance(excinfo.value, ValueError)


def test_other_validation_errors_pass_through():
    with pytest.raises(ValidationError):
        StoreConfig.for_application("demo", json_indent=-1)


def test_config_is_frozen():
    config = StoreConfig(application_name="demo")

    with pytest.raises(ValidationError):
        config.application_name = "other"
