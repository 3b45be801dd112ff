#!/usr/bin/env python
# Copyright 2026-present Kensho Technologies, LLC.
"""Combine two GraphQL schema files and print the combined schema to standard output.

Used as: python -m graphql_combiner.tool first.graphql second.graphql [--prefer first]
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import combine_schemas
from .exceptions import GraphQLCombinerError
from .schema_combination.utils import always_merge, prefer_first, prefer_second


_CONFLICT_POLICIES = {
    "merge": always_merge,
    "first": prefer_first,
    "second": prefer_second,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Read two schema files, and output their combination to standard output."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("first_schema", help="path to the first schema file")
    parser.add_argument("second_schema", help="path to the second schema file")
    parser.add_argument(
        "--prefer",
        choices=sorted(_CONFLICT_POLICIES),
        default="merge",
        help="how to resolve types defined in both schemas (default: merge them)",
    )
    parser.add_argument("--verbose", action="store_true", help="log each combination decision")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        with open(args.first_schema, "r") as f:
            first_schema_string = f.read()
        with open(args.second_schema, "r") as f:
            second_schema_string = f.read()
    except OSError as e:
        sys.stderr.write(f"Could not read schema file: {e}\n")
        return 1

    try:
        combined_schema_string = combine_schemas(
            first_schema_string,
            second_schema_string,
            conflict_policy=_CONFLICT_POLICIES[args.prefer],
        )
    except GraphQLCombinerError as e:
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 1

    sys.stdout.write(combined_schema_string + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
