"""
Domain Layer - Shape Descriptors

This module defines the generic data model that describes the shape of a value
to build or display. Shapes are supplied by the caller; nothing here inspects
Python types. Walkers dispatch on the descriptor class.

Value conventions (what a build produces and a display accepts):
- bool / integers / floats: Python scalars (f32 rounded to single precision)
- char: a one-character str
- string: str, bytes: bytes
- unit: ()
- option: None or the inner value; wrapped in Some when the inner shape can
  itself produce None
- tuple: tuple, sequence: list, map: dict
- struct / tuple-struct / unit-struct / newtype: an instance of `model` when
  one is given, otherwise dict / tuple / () / the bare inner value
- enum: a member of `model` (an enum.Enum of unit variants) or an EnumValue
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

"""
PrimitiveKind names the scalar being exchanged. The name doubles as the
label of the request or response.
"""
PrimitiveKind = Literal[
    "bool",
    "i8",
    "i16",
    "i32",
    "i64",
    "i128",
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
    "f32",
    "f64",
    "char",
]


@dataclass
class PrimitiveShape:
    kind: PrimitiveKind


@dataclass
class StringShape:
    """
    Free text. Identifiers are strings requested under the "identifier" label.
    """
    identifier: bool = False

    @property
    def label(self) -> str:
        return "identifier" if self.identifier else "string"


@dataclass
class BytesShape:
    pass


@dataclass
class UnitShape:
    pass


@dataclass
class OptionShape:
    inner: "Shape"


@dataclass
class UnitStructShape:
    name: str
    model: Optional[type] = None


@dataclass
class NewtypeShape:
    """
    A named wrapper around exactly one value.

    Attributes:
        name: Scope name.
        inner: Shape of the wrapped value.
        model: Optional pydantic RootModel subclass. Without one the wrapper
            is transparent and the bare inner value is used.
    """
    name: str
    inner: "Shape"
    model: Optional[type] = None


@dataclass
class TupleShape:
    elements: List["Shape"] = field(default_factory=list)


@dataclass
class TupleStructShape:
    """
    A named fixed-size tuple.

    Attributes:
        name: Scope name.
        elements: Shapes of the elements, in order.
        model: Optional class constructed positionally from the elements
            (a NamedTuple, for example). It must iterate its elements back.
    """
    name: str
    elements: List["Shape"] = field(default_factory=list)
    model: Optional[type] = None


@dataclass
class SeqShape:
    element: "Shape"


@dataclass
class MapShape:
    key: "Shape"
    value: "Shape"


@dataclass
class StructShape:
    """
    A named record with fixed fields.

    Attributes:
        name: Scope name.
        fields: Field names mapped to their shapes, in declaration order.
        model: Optional class constructed with the fields as keyword arguments
            (a dataclass or a pydantic model). Display reads the fields back
            as attributes, or as keys when the value is a mapping.
    """
    name: str
    fields: Dict[str, "Shape"] = field(default_factory=dict)
    model: Optional[type] = None


@dataclass
class Variant:
    """
    One alternative of an enum.

    The payload decides the variant's form:
    - None: unit variant
    - a shape: newtype variant
    - a list of shapes: tuple variant
    - a dict of field names to shapes: struct variant

    Attributes:
        name: Variant name, as typed by the operator.
        payload: See above.
        model: Optional class for tuple and struct payloads (see
            TupleStructShape and StructShape).
    """
    name: str
    payload: Union[None, "Shape", List["Shape"], Dict[str, "Shape"]] = None
    model: Optional[type] = None

    @property
    def form(self) -> str:
        if self.payload is None:
            return "unit"
        if isinstance(self.payload, list):
            return "tuple"
        if isinstance(self.payload, dict):
            return "struct"
        return "newtype"


@dataclass
class EnumShape:
    """
    A tagged union.

    Attributes:
        name: Scope name.
        variants: The declared variants, in order.
        model: Optional enum.Enum class whose members are named after unit
            variants. Without one, values are EnumValue instances.
    """
    name: str
    variants: List[Variant] = field(default_factory=list)
    model: Optional[type] = None

    @property
    def variant_names(self) -> List[str]:
        return [v.name for v in self.variants]

    def get_variant(self, name: str) -> Optional[Variant]:
        return next((v for v in self.variants if v.name == name), None)


Shape = Union[
    PrimitiveShape,
    StringShape,
    BytesShape,
    UnitShape,
    OptionShape,
    UnitStructShape,
    NewtypeShape,
    TupleShape,
    TupleStructShape,
    SeqShape,
    MapShape,
    StructShape,
    EnumShape,
]


@dataclass(frozen=True)
class Some:
    """Present value of an optional whose inner shape can itself be None."""
    value: Any


@dataclass(frozen=True)
class EnumValue:
    """
    A built enum value.

    Attributes:
        variant: Name of the selected variant.
        payload: None for unit variants, the inner value for newtype
            variants, a tuple (or model) for tuple variants, a dict (or model)
            for struct variants.
    """
    variant: str
    payload: Any = None


def produces_none(shape: Shape) -> bool:
    """True when a value of this shape can be None."""
    if isinstance(shape, OptionShape):
        return True
    if isinstance(shape, NewtypeShape) and shape.model is None:
        return produces_none(shape.inner)
    return False
