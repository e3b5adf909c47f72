"""Shared pytest configuration, marker assignment and document fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

PAGE_HTML = """\
<!DOCTYPE html>
<html>
<head>
    <title>Test</title>
    <style>
        body { background: red; }
        .test { color: blue; }
    </style>
</head>
<body>
    <h1>Test</h1>
    <script>
        console.log('Hello World');
        function test() { return true; }
    </script>
</body>
</html>
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_html(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing an HTML document into ``tmp_path``."""

    def _write(content: str = PAGE_HTML, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
