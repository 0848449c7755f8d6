import os
import pytest
import yaml
from jsonshape import JsonSchemaMatcher, setup
from jsonshape.config import load_config


@pytest.fixture(scope="session")
def config():
    config_path = os.path.join(os.path.dirname(__file__), "config.yaml")
    with open(config_path) as f:
        return yaml.safe_load(f)


@pytest.fixture(scope="session")
def merged_config():
    """Return matcher options from config.yaml overlaid with environment variables.

    Environment variables supported:
      - JSONSHAPE_ALL_ERRORS (true/false)
      - JSONSHAPE_DRAFT
    """
    return load_config(os.path.join(os.path.dirname(__file__), "config.yaml"))


@pytest.fixture(scope="session")
def matcher(merged_config):
    """Matcher built from the merged configuration."""
    return JsonSchemaMatcher.from_config(merged_config)


@pytest.fixture(scope="session", autouse=True)
def registered_matcher(matcher):
    """Register the session matcher once so tests can call expect_to_match_schema directly."""
    return setup(matcher)
