# Copyright 2026-present Kensho Technologies, LLC.
from .combine import combine_type_graphs  # noqa
from .copy_types import copy_type  # noqa
from .merge_types import merge_types  # noqa
from .utils import (  # noqa
    ArgumentMergeUnsupportedError,
    CombinationSettings,
    ConflictPolicy,
    MergeError,
    MergePrecedence,
    ScalarMismatchError,
    TypeMismatchError,
    UnknownTypeCategoryError,
    always_merge,
    prefer_first,
    prefer_second,
    skip_conflicts,
)
