"""
Domain Layer - Shape Descriptors

Defines the generic data model describing the shape of the values that are
built from, or displayed to, an interactive transcript.
"""

from interview.domain.models import (
    BytesShape,
    EnumShape,
    EnumValue,
    MapShape,
    NewtypeShape,
    OptionShape,
    PrimitiveKind,
    PrimitiveShape,
    SeqShape,
    Shape,
    Some,
    StringShape,
    StructShape,
    TupleShape,
    TupleStructShape,
    UnitShape,
    UnitStructShape,
    Variant,
)

__all__ = [
    "BytesShape",
    "EnumShape",
    "EnumValue",
    "MapShape",
    "NewtypeShape",
    "OptionShape",
    "PrimitiveKind",
    "PrimitiveShape",
    "SeqShape",
    "Shape",
    "Some",
    "StringShape",
    "StructShape",
    "TupleShape",
    "TupleStructShape",
    "UnitShape",
    "UnitStructShape",
    "Variant",
]
