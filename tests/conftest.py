"""Shared fixtures."""

import json

import pytest

from webpub_subjects import ListWarningLogger, reset_metrics


@pytest.fixture
def warnings() -> ListWarningLogger:
    return ListWarningLogger()


@pytest.fixture(autouse=True)
def clean_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def write_manifest(tmp_path):
    """Write a manifest dict to a temporary file and return its path."""

    def write(manifest, name: str = "manifest.json") -> str:
        path = tmp_path / name
        path.write_text(manifest if isinstance(manifest, str) else json.dumps(manifest), encoding="utf-8")
        return str(path)

    return write
