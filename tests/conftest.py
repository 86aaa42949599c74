import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest


def _add_src_to_path() -> None:
    src_path = Path(__file__).resolve().parents[1] / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_project(write_file) -> Callable[..., Path]:
    def _write(directory: Path, analysis: list[dict[str, Any]], name: str = "project.aipj") -> Path:
        return write_file(directory / name, json.dumps({"analysis": analysis}))

    return _write
