import json
import shutil
import tempfile
from pathlib import Path

import pytest

from symdoc.tool_config import ToolConfig


@pytest.fixture
def temp_dir():
    path = Path(tempfile.mkdtemp(prefix="symdoc_test_"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Keep symdoc.log out of the working tree while tests run."""
    monkeypatch.setenv("SYMDOC_LOG_DIR", str(tmp_path))


@pytest.fixture(autouse=True)
def fresh_tool_config():
    ToolConfig.reset()
    yield
    ToolConfig.reset()


def _symbol_dict(precise, kind, path, title=None, fragments=None, doc=None, access="public"):
    data = {
        "identifier": {"precise": precise, "interfaceLanguage": "swift"},
        "kind": {"identifier": kind, "displayName": kind},
        "pathComponents": list(path),
        "names": {"title": title if title is not None else path[-1]},
        "accessLevel": access,
    }
    if fragments is not None:
        data["declarationFragments"] = [
            {"kind": "text", "spelling": text} if isinstance(text, str)
            else {"kind": text[0], "spelling": text[1]}
            for text in fragments
        ]
    if doc is not None:
        data["docComment"] = {"lines": [{"text": line} for line in doc]}
    return data


@pytest.fixture
def symbol_dict():
    """Factory for one entry of a symbol graph's "symbols" array."""
    return _symbol_dict


@pytest.fixture
def graph_dict():
    """Factory for a whole symbol graph document."""
    def make(module, symbols, relationships=None):
        data = {
            "metadata": {"formatVersion": {"major": 0, "minor": 6, "patch": 0}},
            "module": {"name": module, "platform": {}},
            "symbols": symbols,
        }
        if relationships is not None:
            data["relationships"] = [
                {"kind": kind, "source": source, "target": target}
                for kind, source, target in relationships
            ]
        return data
    return make


@pytest.fixture
def write_graph(temp_dir):
    """Write a symbol graph document into temp_dir/graphs under the given file name."""
    graphs = temp_dir / "graphs"
    graphs.mkdir(exist_ok=True)

    def write(file_name, data):
        path = graphs / file_name
        if isinstance(data, bytes):
            path.write_bytes(data)
        elif isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    write.directory = graphs
    return write
