"""
Tests for HTTP methods.
"""

import pytest

from mooring import Method, supports_multipart

BODY_METHODS = {Method.POST, Method.PUT, Method.PATCH, Method.CONNECT}


class TestSupportsMultipart:
    """Test suite for the multipart lookup."""

    @pytest.mark.parametrize("method", list(Method))
    def test_lookup_for_every_method(self, method: Method) -> None:
        """Test that only verbs that carry a body support multipart."""

        expected = method in BODY_METHODS

        assert method.supports_multipart is expected
        assert supports_multipart(method) is expected

    @pytest.mark.parametrize(
        "verb,expected",
        [
            ("post", True),
            ("Put", True),
            ("PATCH", True),
            ("connect", True),
            ("get", False),
            ("DELETE", False),
            ("head", False),
            ("options", False),
            ("trace", False),
            ("PURGE", False),
        ],
    )
    def test_lookup_from_verb_strings(self, verb: str, expected: bool) -> None:
        """Test that plain verb strings are accepted case-insensitively."""

        assert supports_multipart(verb) is expected

    def test_lookup_is_stable(self) -> None:
        """Test that the same verb always gets the same answer."""

        answers = {supports_multipart(Method.PATCH) for _ in range(5)}

        assert answers == {True}


class TestMethod:
    """Test suite for the Method enum."""

    def test_method_values_are_verbs(self) -> None:
        """Test that members compare equal to their verb strings."""

        assert Method.GET == "GET"
        assert str(Method.DELETE) == "DELETE"
        assert Method("PATCH") is Method.PATCH
