import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def sample_text():
    return "hey pratap"


@pytest.fixture()
def coder(sample_text):
    """Codec trained on the demo sample text."""
    from codec import HuffmanCodec

    return HuffmanCodec(sample_text)


def is_prefix_free(codes):
    """Return ``True`` if no code in ``codes`` is a prefix of another."""
    ordered = sorted(codes)
    return all(
        not ordered[i + 1].startswith(ordered[i])
        for i in range(len(ordered) - 1)
    )


@pytest.fixture()
def is_prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free
