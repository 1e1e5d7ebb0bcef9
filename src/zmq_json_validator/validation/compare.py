"""Structural equality of decoded JSON value trees."""

from typing import Any

import msgspec

# Deeper documents are rejected as unparseable before any recursive walk.
MAX_NESTING_DEPTH = 128


class Mismatch(msgspec.Struct, frozen=True):
    """The first point at which two JSON trees diverge.

    Attributes:
        path (str): Location of the divergence, e.g. ``.txs[2].fee``. The
            document root is the empty string.
        reason (str): Human-readable description of the difference.
    """

    path: str
    reason: str

    @property
    def display_path(self) -> str:
        return self.path if self.path else "$"


def _kind(value: Any) -> str:
    """Classify a decoded JSON value; bools are never numbers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def nesting_depth(value: Any) -> int:
    """Return how many arrays/objects deep ``value`` goes; scalars are 0.

    Walks the tree with an explicit stack, so arbitrarily deep input is safe.
    """
    depth = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in children)
    return depth


class StructuralComparator:
    """
    Compares two decoded JSON trees while ignoring object key order.

    Objects must have identical key sets, arrays are compared element-wise in
    order, numbers by value and strings by exact content. Keys are visited in
    sorted order so the reported first difference is deterministic.

    The walk is recursive; callers are expected to bound the input with
    ``nesting_depth`` and ``MAX_NESTING_DEPTH`` first.

    Parameters
    ----------
    strict_numeric_types : bool, optional
        If True, an integer and a float of equal value (``100`` vs ``100.0``)
        are reported as different (default is False).
    """

    def __init__(self, strict_numeric_types: bool = False) -> None:
        self.strict_numeric_types = strict_numeric_types

    def compare(self, expected: Any, actual: Any) -> Mismatch | None:
        """
        Find the first difference between ``expected`` and ``actual``.

        Parameters
        ----------
        expected : Any
            The reference tree, e.g. the JSON as originally received.

        actual : Any
            The tree to check against the reference.

        Returns
        -------
        Mismatch | None
            The first difference found, or None if the trees are equal.
        """
        return self._compare_(expected, actual, "")

    def is_equal(self, expected: Any, actual: Any) -> bool:
        return self.compare(expected, actual) is None

    def _compare_(self, expected: Any, actual: Any, path: str) -> Mismatch | None:
        expected_kind = _kind(expected)
        actual_kind = _kind(actual)
        if expected_kind != actual_kind:
            return Mismatch(
                path=path,
                reason=f"expected {expected_kind} {expected!r}, got {actual_kind} {actual!r}",
            )

        if expected_kind == "object":
            return self._compare_objects_(expected, actual, path)
        if expected_kind == "array":
            return self._compare_arrays_(expected, actual, path)
        if expected_kind == "number":
            return self._compare_numbers_(expected, actual, path)

        if expected != actual:
            return Mismatch(path=path, reason=f"expected {expected!r}, got {actual!r}")
        return None

    def _compare_objects_(
        self, expected: dict, actual: dict, path: str
    ) -> Mismatch | None:
        for key in sorted(expected.keys() | actual.keys()):
            child_path = f"{path}.{key}"
            if key not in actual:
                return Mismatch(
                    path=child_path,
                    reason=f"field present in original ({expected[key]!r}) but lost in round trip",
                )
            if key not in expected:
                return Mismatch(
                    path=child_path,
                    reason=f"field not in original but added by round trip ({actual[key]!r})",
                )
            mismatch = self._compare_(expected[key], actual[key], child_path)
            if mismatch is not None:
                return mismatch
        return None

    def _compare_arrays_(
        self, expected: list, actual: list, path: str
    ) -> Mismatch | None:
        for index, (expected_item, actual_item) in enumerate(zip(expected, actual)):
            mismatch = self._compare_(expected_item, actual_item, f"{path}[{index}]")
            if mismatch is not None:
                return mismatch

        if len(expected) != len(actual):
            index = min(len(expected), len(actual))
            return Mismatch(
                path=f"{path}[{index}]",
                reason=f"expected {len(expected)} elements, got {len(actual)}",
            )
        return None

    def _compare_numbers_(
        self, expected: int | float, actual: int | float, path: str
    ) -> Mismatch | None:
        if self.strict_numeric_types and type(expected) is not type(actual):
            return Mismatch(
                path=path,
                reason=(
                    f"expected {type(expected).__name__} {expected!r}, "
                    f"got {type(actual).__name__} {actual!r}"
                ),
            )
        if expected != actual:
            return Mismatch(path=path, reason=f"expected {expected!r}, got {actual!r}")
        return None


def find_mismatch(
    expected: Any, actual: Any, *, strict_numeric_types: bool = False
) -> Mismatch | None:
    """Shorthand for ``StructuralComparator(...).compare(expected, actual)``."""
    return StructuralComparator(strict_numeric_types).compare(expected, actual)
