"""Shared pytest configuration for jsinterop tests."""

import textwrap

import pytest
from jsinterop.config import GeneratorConfig


@pytest.fixture
def config():
    """Generator config with a fixed namespace, independent of the environment."""
    return GeneratorConfig(namespace="Test.Interop")


@pytest.fixture
def write_js(tmp_path):
    """
    Write a dedented JavaScript file under tmp_path and return its path.

    Example:
        def test_something(write_js):
            path = write_js("utils.js", '''
                /** @returns {number} */
                function answer() { return 42; }
            ''')
    """

    def _write(name: str, source: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
        return path

    return _write
