"""
Displayer - Display Direction of the Value Walker

Renders an existing value as the transcript an operator would have typed to
build it: the same scopes, with every request replaced by a response. Feeding
the non-synthetic responses of a display pass to a Builder reproduces the
value.
"""

import enum
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from ..domain.models import (
    BytesShape,
    EnumShape,
    EnumValue,
    MapShape,
    NewtypeShape,
    OptionShape,
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
    produces_none,
)
from ..exceptions import ValidationError
from ..schemas.kinds import RequestKind
from ..transport.interface import Responder
from . import primitives
from .walker import Walker


class Displayer(Walker):
    handlers = {
        PrimitiveShape: "display_primitive",
        StringShape: "display_string",
        BytesShape: "display_bytes",
        UnitShape: "display_unit",
        OptionShape: "display_option",
        UnitStructShape: "display_unit_struct",
        NewtypeShape: "display_newtype",
        TupleShape: "display_tuple",
        TupleStructShape: "display_tuple_struct",
        SeqShape: "display_seq",
        MapShape: "display_map",
        StructShape: "display_struct",
        EnumShape: "display_enum",
    }

    def __init__(self, transport: Responder):
        super().__init__(transport)

    def display(self, shape: Shape, value: Any) -> None:
        self._handler_for(shape)(shape, value)

    # ==========================================================================
    # Leaves
    # ==========================================================================

    def display_primitive(self, shape: PrimitiveShape, value: Any) -> None:
        try:
            text = primitives.check_value(shape.kind, value)
        except ValueError as e:
            raise ValidationError(f"Cannot display {value!r} as {shape.kind}: {e}") from e
        self.transport.respond(RequestKind.DATUM, shape.kind, text)
        self._complete()

    def display_string(self, shape: StringShape, value: Any) -> None:
        if not isinstance(value, str):
            raise ValidationError(f"Cannot display {value!r} as {shape.label}")
        self.transport.respond(RequestKind.DATUM, shape.label, value)
        self._complete()

    def display_bytes(self, shape: BytesShape, value: Any) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise ValidationError(f"Cannot display {value!r} as bytes")
        for byte in value:
            self._answer("Add byte?", True)
            self.transport.respond(RequestKind.DATUM, "u8", str(byte))
        self._answer("Add byte?", False)
        self._complete()

    def display_unit(self, shape: UnitShape, value: Any) -> None:
        self._respond_unit()
        self._complete()

    # ==========================================================================
    # Wrappers
    # ==========================================================================

    def display_option(self, shape: OptionShape, value: Any) -> None:
        self._begin_implicit("option")
        if value is None:
            self._answer("Some value?", False)
            self._complete()
            return
        if produces_none(shape.inner):
            if not isinstance(value, Some):
                raise ValidationError(f"Nested optional value must be wrapped in Some, got {value!r}")
            value = value.value
        self._answer("Some value?", True)
        self.display(shape.inner, value)

    def display_unit_struct(self, shape: UnitStructShape, value: Any) -> None:
        self._begin_explicit(shape.name, 1)
        self._respond_unit()
        self._end_explicit()

    def display_newtype(self, shape: NewtypeShape, value: Any) -> None:
        if shape.model is not None:
            if not isinstance(value, shape.model):
                raise ValidationError(f"Expected {shape.model.__name__}, got {value!r}")
            value = value.root
        self._begin_implicit(shape.name, 1)
        self.display(shape.inner, value)

    # ==========================================================================
    # Containers
    # ==========================================================================

    def display_tuple(self, shape: TupleShape, value: Any) -> None:
        items = self._as_items(value, len(shape.elements), "tuple")
        self._begin_explicit("tuple", len(shape.elements))
        self._display_elements(shape.elements, items)
        self._end_explicit()

    def display_tuple_struct(self, shape: TupleStructShape, value: Any) -> None:
        items = self._as_items(value, len(shape.elements), shape.name)
        self._begin_explicit(shape.name, len(shape.elements))
        self._display_elements(shape.elements, items)
        self._end_explicit()

    def display_seq(self, shape: SeqShape, value: Any) -> None:
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
            raise ValidationError(f"Cannot display {value!r} as a sequence")
        self._begin_explicit("seq")
        for index, item in enumerate(value):
            self._begin_explicit(self._slot_label(index))
            self._answer("Add element?", True)
            self.display(shape.element, item)
            self._end_explicit()
        self._begin_explicit(self._slot_label(len(value)))
        self._answer("Add element?", False)
        self._end_explicit()
        self._end_explicit()

    def display_map(self, shape: MapShape, value: Any) -> None:
        if not isinstance(value, Mapping):
            raise ValidationError(f"Cannot display {value!r} as a map")
        self._begin_explicit("map")
        for index, (key, item) in enumerate(value.items()):
            self._begin_explicit(self._slot_label(index))
            self._answer("Add entry?", True)
            self.display(shape.key, key)
            self.display(shape.value, item)
            self._end_explicit()
        self._begin_explicit(self._slot_label(len(value)))
        self._answer("Add entry?", False)
        self._end_explicit()
        self._end_explicit()

    def display_struct(self, shape: StructShape, value: Any) -> None:
        values = self._field_values(shape.name, shape.fields, value)
        self._begin_explicit(shape.name, len(shape.fields))
        self._display_fields(shape.fields, values)
        self._end_explicit()

    def display_enum(self, shape: EnumShape, value: Any) -> None:
        if isinstance(value, EnumValue):
            name, payload = value.variant, value.payload
        elif isinstance(value, enum.Enum):
            name, payload = value.name, None
        else:
            raise ValidationError(f"Cannot display {value!r} as {shape.name}")

        variant = shape.get_variant(name)
        if variant is None:
            raise ValidationError(f"'{name}' is not a variant of {shape.name}")

        self._begin_explicit(shape.name)
        if len(shape.variants) == 1:
            self.transport.respond(RequestKind.SYNTHETIC, "variant", name)
        else:
            self.transport.respond(RequestKind.DATUM, "variant", name)
        self._display_payload(variant, payload)
        self._end_explicit()

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _answer(self, question: str, yes: bool) -> None:
        self.transport.respond(RequestKind.QUESTION, question, "yes" if yes else "no")

    def _display_elements(self, elements: List[Shape], items: List[Any]) -> None:
        for index, (element, item) in enumerate(zip(elements, items)):
            self._begin_explicit(self._element_label(index, len(elements)))
            self.display(element, item)
            self._end_explicit()

    def _display_fields(self, fields: Dict[str, Shape], values: Dict[str, Any]) -> None:
        for name, field_shape in fields.items():
            self._begin_implicit(name, 1)
            self.display(field_shape, values[name])

    def _display_payload(self, variant: Variant, payload: Any) -> None:
        form = variant.form
        if form == "unit":
            return
        if form == "newtype":
            self.display(variant.payload, payload)
            return
        if form == "tuple":
            items = self._as_items(payload, len(variant.payload), variant.name)
            self._begin_explicit(variant.name, len(variant.payload))
            self._display_elements(variant.payload, items)
            self._end_explicit()
            return

        values = self._field_values(variant.name, variant.payload, payload)
        self._begin_explicit(variant.name, len(variant.payload))
        self._display_fields(variant.payload, values)
        self._end_explicit()

    @staticmethod
    def _as_items(value: Any, length: int, name: str) -> List[Any]:
        try:
            items = list(value)
        except TypeError:
            raise ValidationError(f"Cannot display {value!r} as {name}") from None
        if len(items) != length:
            raise ValidationError(f"{name} expects {length} element(s), got {len(items)}")
        return items

    @staticmethod
    def _field_values(name: str, fields: Dict[str, Shape], value: Any) -> Dict[str, Any]:
        values = {}
        for field_name in fields:
            try:
                if isinstance(value, Mapping):
                    values[field_name] = value[field_name]
                else:
                    values[field_name] = getattr(value, field_name)
            except (KeyError, AttributeError):
                raise ValidationError(f"{name} value has no field '{field_name}'") from None
        return values
