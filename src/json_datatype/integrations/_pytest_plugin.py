"""pytest plugin for json-datatype.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_datatype import Document, parse


def _as_document(value: str | Document) -> Document:
    return value if isinstance(value, Document) else parse(value)


@pytest.fixture(scope="session")
def assert_json_equal() -> Any:
    """Fixture that returns a callable JSON document equality asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_key_order(assert_json_equal):
            assert_json_equal('{"a":1,"b":2}', '{"b":2,"a":1}')

        def test_value_change(assert_json_equal):
            with pytest.raises(AssertionError, match=r"not equal"):
                assert_json_equal('{"a":1}', '{"a":2}')

    Returns:
        A callable ``_assert(actual, expected) -> None`` accepting JSON text or
        Documents that raises ``AssertionError`` when the documents differ.
    """

    def _assert(actual: str | Document, expected: str | Document) -> None:
        """Assert that two JSON documents are equal under Document equality.

        Args:
            actual:   JSON text or Document produced by the code under test.
            expected: The expected JSON text or Document.

        Raises:
            AssertionError: When the documents differ, with a message showing
                the display form and the canonical form of each side.
            InvalidJsonData: When either side is text that does not parse.
        """
        actual_doc = _as_document(actual)
        expected_doc = _as_document(expected)
        if actual_doc != expected_doc:
            raise AssertionError(
                f"JSON documents not equal\n"
                f"  actual:   {actual_doc}\n"
                f"  expected: {expected_doc}\n"
                f"  actual (canonical):   {Document.from_node(actual_doc.root)}\n"
                f"  expected (canonical): {Document.from_node(expected_doc.root)}"
            )

    return _assert
