import logging

import pytest
import yaml


@pytest.fixture
def catalog_data():
    return {
        "catalog": {"name": "tweets", "version": "1.2"},
        "outcomes": {
            "tweet": ["success", "failure"],
            "fetch": ["ok", "not_found", "timeout"],
        },
        "logging": {"level": "warning", "format": "structured"},
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_data):
    path = tmp_path / "outcomes.yaml"
    path.write_text(yaml.safe_dump(catalog_data, sort_keys=False))
    return path


@pytest.fixture(autouse=True)
def reset_outcomes_logger():
    # CLI invocations install handlers on the package logger
    yield
    logger = logging.getLogger("outcomes")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
