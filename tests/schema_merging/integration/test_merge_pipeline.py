"""End-to-end inference and merge tests."""

from __future__ import annotations

import yaml
from raml_reflector import merge_with_types
from raml_reflector.schema_merging import RAML_HEADER
from reflection_samples import SAMPLE_PERSON, Derived, Event, Order, TreeNode

_TEMPLATE = """#%RAML 1.0
title: Shop
types:
  Address:
    type: object
    properties:
      line: string
"""


def test_person_example_produces_single_entry() -> None:
    merged = merge_with_types("types: {}\n", SAMPLE_PERSON)

    assert merged == (
        RAML_HEADER
        + "types:\n"
        + "  Person:\n"
        + "    type: object\n"
        + "    properties:\n"
        + "      Name:\n"
        + "        type: string\n"
        + "        description: ''\n"
        + "      Age:\n"
        + "        type: integer\n"
        + "        description: ''\n"
    )


def test_template_entries_survive_and_missing_types_are_added() -> None:
    merged = yaml.safe_load(merge_with_types(_TEMPLATE, Order, TreeNode, Derived, Event))
    types = merged["types"]

    assert merged["title"] == "Shop"
    assert types["Address"] == {"type": "object", "properties": {"line": "string"}}
    assert list(types) == [
        "Address",
        "Order",
        "Item",
        "TreeNode",
        "Derived",
        "Event",
        "datetime",
        "Color",
        "Coordinates",
    ]
    assert types["Order"]["properties"]["shipping?"]["type"] == "Address"
    assert types["TreeNode"]["properties"]["Children"]["type"] == "TreeNode[]"
    assert set(types["Derived"]["properties"]) == {"X", "Y"}
    assert types["datetime"] == {"type": "string"}


def test_pipeline_is_idempotent() -> None:
    values = (Order, TreeNode, Derived, Event, SAMPLE_PERSON)
    first = merge_with_types(_TEMPLATE, *values)
    second = merge_with_types(first, *values)

    assert second == first
