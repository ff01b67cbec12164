"""
Pytest configuration and fixtures.
"""
import logging
import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_lines():
    """Two-term glossary where beta mentions alpha."""
    return ["alpha", "first term", "", "beta", "second term mentions alpha", ""]


@pytest.fixture
def glossary_file(temp_dir):
    """Glossary source file with three related terms."""
    path = temp_dir / "terms.txt"
    path.write_text(
        "meaning\n"
        "the idea a word stands for\n"
        "\n"
        "word\n"
        "a unit of language;\n"
        "it carries meaning.\n"
        "\n"
        "book\n"
        "a long written work made of word after word\n",
        encoding="utf-8"
    )
    return path


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate tests from local config files and environment overrides."""
    for name in ("GLOSSARY_LOG_LEVEL", "GLOSSARY_OUTPUT_DIR",
                 "GLOSSARY_ENCODING", "GLOSSARY_DUPLICATES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("glossary_builder")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
