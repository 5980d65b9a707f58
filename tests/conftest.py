"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample documents, and mock configurations
to ensure tests are isolated and safe.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="contentutils_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "text": {
            "ellipsis": "…",
            "snippet_length": 40
        },
        "search": {
            "max_gap": 10,
            "prefix": True
        },
        "pruning": {
            "reserved_prefix": "$",
            "preserved_keys": ["$id"]
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def sample_document() -> dict:
    """
    Create a document tree mixing stored and temporary properties.

    Returns:
        Nested dict with "_"-prefixed keys at several depths.
    """
    return {
        "_id": "doc-1",
        "title": "Regulations",
        "_permissions": {"edit": True},
        "body": {
            "_rendered": "<p>cached</p>",
            "items": [
                {"_id": "item-1", "_join": {"slug": "x"}, "text": "first"},
                {"text": "second", "tags": ["_keep", "visible"]}
            ]
        }
    }


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from contentutils.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logging setup flag between tests.

    Handlers added to the package logger during the test are closed and
    removed, and its level is restored.
    """
    import logging
    from contentutils.core import logger

    package_logger = logging.getLogger(logger.PACKAGE_LOGGER)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level

    logger._logging_configured = False
    yield
    logger._logging_configured = False

    for handler in list(package_logger.handlers):
        if handler not in original_handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(original_level)


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """
    Load the temporary config as the global configuration.

    Settings that callers leave unspecified are then taken from the
    temp config rather than the repository's config/config.json.
    """
    from contentutils.core.config_loader import get_config
    yield get_config(temp_config)
