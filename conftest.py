from __future__ import annotations

import os

import pytest
import requests_mock as requests_mock_lib


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("NOAA_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
