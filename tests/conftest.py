# conftest.py

import json
import logging

import pytest

import constants


@pytest.fixture
def run_config(tmp_path, monkeypatch):
    """Writes a small config.json into a temporary working directory."""
    monkeypatch.chdir(tmp_path)
    config = {
        "run_id": "test_run",
        "master_seed": 1234,
        "logging": {"level": "DEBUG", "format": "%(levelname)s - %(message)s"},
        "region": {"corner_a": [2.0, 0.0], "corner_b": [0.0, 2.0]},
        "sampling": {"point_count": 500, "padding": 0.5},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    yield path

    logger = logging.getLogger(constants.LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
