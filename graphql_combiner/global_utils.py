# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Dict, Optional, Set


def assert_set_equality(set1: Set[Any], set2: Set[Any]) -> None:
    """Assert that the sets are the same."""
    diff1 = set1.difference(set2)
    diff2 = set2.difference(set1)

    if diff1 or diff2:
        error_message_list = ["Expected sets to have the same keys."]
        if diff1:
            error_message_list.append(f"Keys in the first set but not the second: {diff1}.")
        if diff2:
            error_message_list.append(f"Keys in the second set but not the first: {diff2}.")
        raise AssertionError(" ".join(error_message_list))


def merge_extensions(
    losing_extensions: Optional[Dict[str, Any]], winning_extensions: Optional[Dict[str, Any]]
) -> Dict[str, Any]:
    """Shallow-merge two extension dicts, with the winning side overwriting on key collisions.

    Neither input is modified. Missing (None) inputs are treated as empty.
    """
    result: Dict[str, Any] = dict(losing_extensions or {})
    result.update(winning_extensions or {})
    return result
