"""Specimen-based inference tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from enum import Enum

import pytest
from raml_reflector.introspection.specimen_inference import (
    CANONICAL_INSTANT,
    infer_from_custom_serializer,
    infer_from_example,
    instantiate_specimen,
)
from raml_reflector.type_description.schema_models import GenerationError, Property
from reflection_samples import BrokenSerializer, Color, Coordinates, NotJson, Person


class Empty(Enum):
    pass


class Version:
    def to_json(self) -> bytes:
        return b"3"


class NeedsArguments:
    def __init__(self, value: int) -> None:
        self.value = value

    def to_json(self) -> str:
        return str(self.value)


@dataclass
class Zeroed:
    Flag: bool
    Count: int
    Ratio: float
    Label: str
    Tags: list[str]
    Pair: tuple[int, ...]
    Extra: dict[str, int]
    Owner: Person
    Maybe: Person | None
    Colour: Color
    Defaulted: str = "kept"
    Factory: list[int] = field(default_factory=lambda: [1])


def test_date_time_specimens_use_canonical_instant() -> None:
    assert instantiate_specimen(datetime) == CANONICAL_INSTANT
    assert instantiate_specimen(date) == date(1970, 1, 1)
    assert instantiate_specimen(time) == time(0, 0, tzinfo=UTC)


def test_dataclass_specimen_uses_zero_values_and_defaults() -> None:
    specimen = instantiate_specimen(Zeroed)

    assert specimen == Zeroed(
        Flag=False,
        Count=0,
        Ratio=0.0,
        Label="",
        Tags=[],
        Pair=(),
        Extra={},
        Owner=Person(Name="", Age=0),
        Maybe=None,
        Colour=Color.RED,
        Defaulted="kept",
        Factory=[1],
    )


def test_enum_specimen_is_first_member() -> None:
    assert instantiate_specimen(Color) is Color.RED
    with pytest.raises(GenerationError, match="no members"):
        instantiate_specimen(Empty)


def test_specimen_of_class_requiring_arguments_aborts() -> None:
    with pytest.raises(GenerationError, match="Could not instantiate"):
        instantiate_specimen(NeedsArguments)


def test_custom_serializer_output_becomes_properties() -> None:
    assert infer_from_custom_serializer(Coordinates) == [
        Property(name="lat", type="number"),
        Property(name="lng", type="number"),
        Property(name="meta", type="nil"),
    ]


def test_scalar_output_becomes_single_anonymous_property() -> None:
    assert infer_from_custom_serializer(Version) == [Property(name="", type="integer")]
    assert infer_from_custom_serializer(datetime) == [Property(name="", type="string")]


def test_failing_serializer_aborts() -> None:
    with pytest.raises(GenerationError, match="Could not serialize BrokenSerializer"):
        infer_from_custom_serializer(BrokenSerializer)


def test_undecodable_serializer_output_aborts() -> None:
    with pytest.raises(GenerationError, match="Could not deserialize NotJson"):
        infer_from_custom_serializer(NotJson)


def test_example_inference_is_shallow() -> None:
    name, properties = infer_from_example(
        {"id": 1, "ok": True, "nested": {"deep": 1}, "list": [1, 2], "none": None}
    )

    assert name == "object"
    assert properties == [
        Property(name="id", type="integer"),
        Property(name="ok", type="boolean"),
        Property(name="nested", type="object"),
        Property(name="list", type="array"),
        Property(name="none", type="nil"),
    ]


@pytest.mark.parametrize("example", [None, [1, 2], object()])
def test_example_inference_rejects_other_values(example: object) -> None:
    with pytest.raises(GenerationError, match="Can not build type from example"):
        infer_from_example(example)
