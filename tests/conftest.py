# tests/conftest.py
import pytest

from graph_utils import load_graph


@pytest.fixture
def maze():
    """The canonical 18-edge maze shipped in graphWeights."""
    return load_graph()


@pytest.fixture
def write_graph(tmp_path):
    """Write graph text to a temporary file and return its path."""
    def _write(text, name="graphWeights"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write
