"""Base class for generated test modules.

Generated tests call `assert<Kind>` for every assertion kind an @assert
tag can map to. Two-argument assertions take `(expected, actual)`; the
boolean ones take only the actual value.
"""

import os
import unittest
from collections.abc import Mapping, Sequence

# Values compared by type and value under `===`; anything else must be the same object
VALUE_TYPES = (
    type(None), bool, int, float, complex, str, bytes, tuple, list, dict, set, frozenset,
)


class SkeletonTestCase(unittest.TestCase):
    """unittest.TestCase with the assertions generated code relies on."""

    def markTestIncomplete(self, message: str = "") -> None:
        """Skip a test that has not been written yet."""
        raise unittest.SkipTest(f"Incomplete: {message}" if message else "Incomplete")

    # Comparisons

    def assertEquals(self, expected, actual, msg=None):
        self.assertEqual(actual, expected, msg)

    def assertNotEquals(self, expected, actual, msg=None):
        self.assertNotEqual(actual, expected, msg)

    def assertSame(self, expected, actual, msg=None):
        if not _is_same(expected, actual):
            self.fail(self._formatMessage(msg, f"{actual!r} is not identical to {expected!r}"))

    def assertNotSame(self, expected, actual, msg=None):
        if _is_same(expected, actual):
            self.fail(self._formatMessage(msg, f"{actual!r} is identical to {expected!r}"))

    def assertGreaterThan(self, expected, actual, msg=None):
        self.assertGreater(actual, expected, msg)

    def assertGreaterThanOrEqual(self, expected, actual, msg=None):
        self.assertGreaterEqual(actual, expected, msg)

    def assertLessThan(self, expected, actual, msg=None):
        self.assertLess(actual, expected, msg)

    def assertLessThanOrEqual(self, expected, actual, msg=None):
        self.assertLessEqual(actual, expected, msg)

    # Emptiness

    def assertEmpty(self, actual, msg=None):
        if actual:
            self.fail(self._formatMessage(msg, f"{actual!r} is not empty"))

    def assertNotEmpty(self, actual, msg=None):
        if not actual:
            self.fail(self._formatMessage(msg, f"{actual!r} is empty"))

    # Types

    def assertInstanceOf(self, expected, actual, msg=None):
        self.assertIsInstance(actual, expected, msg)

    def assertNotInstanceOf(self, expected, actual, msg=None):
        self.assertNotIsInstance(actual, expected, msg)

    def assertInternalType(self, expected, actual, msg=None):
        if not _is_type(actual, expected):
            self.fail(self._formatMessage(msg, f"{actual!r} is not of type {expected!r}"))

    def assertNotInternalType(self, expected, actual, msg=None):
        if _is_type(actual, expected):
            self.fail(self._formatMessage(msg, f"{actual!r} is of type {expected!r}"))

    def assertContainsOnly(self, expected, actual, msg=None):
        offending = [item for item in actual if not _is_type(item, expected)]
        if offending:
            self.fail(
                self._formatMessage(msg, f"{offending!r} are not of type {expected!r}")
            )

    def assertNotContainsOnly(self, expected, actual, msg=None):
        items = list(actual)
        if items and all(_is_type(item, expected) for item in items):
            self.fail(
                self._formatMessage(msg, f"{actual!r} contains only type {expected!r}")
            )

    # Membership

    def assertContains(self, expected, actual, msg=None):
        self.assertIn(expected, actual, msg)

    def assertNotContains(self, expected, actual, msg=None):
        self.assertNotIn(expected, actual, msg)

    def assertArrayHasKey(self, expected, actual, msg=None):
        if not self._has_key(actual, expected, msg):
            self.fail(self._formatMessage(msg, f"{actual!r} has no key {expected!r}"))

    def assertArrayNotHasKey(self, expected, actual, msg=None):
        if self._has_key(actual, expected, msg):
            self.fail(self._formatMessage(msg, f"{actual!r} has key {expected!r}"))

    def _has_key(self, container, key, msg=None) -> bool:
        """Key lookup for mappings, index lookup for sequences."""
        if isinstance(container, Mapping):
            return key in container
        if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
            if isinstance(key, bool) or not isinstance(key, int):
                return False
            return 0 <= key < len(container)
        self.fail(self._formatMessage(msg, f"{container!r} is not a mapping or sequence"))

    def assertObjectHasAttribute(self, expected, actual, msg=None):
        if not hasattr(actual, expected):
            self.fail(self._formatMessage(msg, f"{actual!r} has no attribute {expected!r}"))

    def assertObjectNotHasAttribute(self, expected, actual, msg=None):
        if hasattr(actual, expected):
            self.fail(self._formatMessage(msg, f"{actual!r} has attribute {expected!r}"))

    # Sizes

    def assertCount(self, expected, actual, msg=None):
        self.assertEqual(len(actual), expected, msg)

    def assertNotCount(self, expected, actual, msg=None):
        self.assertNotEqual(len(actual), expected, msg)

    # Files

    def assertFileExists(self, actual, msg=None):
        if not os.path.exists(actual):
            self.fail(self._formatMessage(msg, f"File {actual!r} does not exist"))

    def assertFileNotExists(self, actual, msg=None):
        if os.path.exists(actual):
            self.fail(self._formatMessage(msg, f"File {actual!r} exists"))

    # Patterns

    def assertRegExp(self, expected, actual, msg=None):
        self.assertRegex(actual, expected, msg)

    def assertNotRegExp(self, expected, actual, msg=None):
        self.assertNotRegex(actual, expected, msg)


def _is_same(expected, actual) -> bool:
    if isinstance(expected, VALUE_TYPES):
        return type(actual) is type(expected) and actual == expected
    return actual is expected


def _is_type(value, expected) -> bool:
    """Check a value against a type or a type name such as `"int"`."""
    if isinstance(expected, str):
        if expected == "None":
            return value is None
        return any(klass.__name__ == expected for klass in type(value).__mro__)
    return isinstance(value, expected)


__all__ = ["SkeletonTestCase"]
