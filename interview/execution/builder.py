"""
Builder - Build Direction of the Value Walker

Constructs a value of a given shape from the answers a Requester supplies.
Each shape maps to a fixed sequence of scope and request operations; leaf
answers that fail to parse are reported and asked again while the transport
is interactive, and fail the whole pass with BadResponse otherwise.
"""

import logging
from typing import Any, Dict, List

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
from ..exceptions import BadResponse, ValidationError
from ..schemas.kinds import ReportKind, RequestKind
from ..transport.interface import Requester
from . import primitives
from .questions import ask_yes_no
from .walker import Walker, construct

logger = logging.getLogger(__name__)


class Builder(Walker):
    handlers = {
        PrimitiveShape: "build_primitive",
        StringShape: "build_string",
        BytesShape: "build_bytes",
        UnitShape: "build_unit",
        OptionShape: "build_option",
        UnitStructShape: "build_unit_struct",
        NewtypeShape: "build_newtype",
        TupleShape: "build_tuple",
        TupleStructShape: "build_tuple_struct",
        SeqShape: "build_seq",
        MapShape: "build_map",
        StructShape: "build_struct",
        EnumShape: "build_enum",
    }

    def __init__(self, transport: Requester):
        super().__init__(transport)

    def build(self, shape: Shape) -> Any:
        return self._handler_for(shape)(shape)

    # ==========================================================================
    # Leaves
    # ==========================================================================

    def build_primitive(self, shape: PrimitiveShape) -> Any:
        variants = primitives.variants_for(shape.kind)
        while True:
            answer = self.transport.request(RequestKind.DATUM, shape.kind, variants)
            try:
                value = primitives.parse(shape.kind, answer)
            except ValueError as e:
                self._reject(f"Failed to parse: {e}")
                continue
            self._complete()
            return value

    def build_string(self, shape: StringShape) -> str:
        answer = self.transport.request(RequestKind.DATUM, shape.label, [])
        self._complete()
        return answer

    def build_bytes(self, shape: BytesShape) -> bytes:
        buf = bytearray()
        while ask_yes_no(self.transport, "Add byte?"):
            while True:
                answer = self.transport.request(
                    RequestKind.DATUM, "u8", primitives.U8_VARIANTS
                )
                try:
                    buf.append(primitives.parse("u8", answer))
                    break
                except ValueError as e:
                    self._reject(f"Failed to parse: {e}")
        self._complete()
        return bytes(buf)

    def build_unit(self, shape: UnitShape) -> tuple:
        self._respond_unit()
        self._complete()
        return ()

    # ==========================================================================
    # Wrappers
    # ==========================================================================

    def build_option(self, shape: OptionShape) -> Any:
        self._begin_implicit("option")
        if not ask_yes_no(self.transport, "Some value?"):
            self._complete()
            return None
        # The inner value's completion closes the option scope.
        value = self.build(shape.inner)
        if produces_none(shape.inner):
            return Some(value)
        return value

    def build_unit_struct(self, shape: UnitStructShape) -> Any:
        self._begin_explicit(shape.name, 1)
        self._respond_unit()
        self._end_explicit()
        if shape.model is not None:
            return construct(shape.name, shape.model)
        return ()

    def build_newtype(self, shape: NewtypeShape) -> Any:
        self._begin_implicit(shape.name, 1)
        value = self.build(shape.inner)
        if shape.model is not None:
            return construct(shape.name, shape.model, value)
        return value

    # ==========================================================================
    # Containers
    # ==========================================================================

    def build_tuple(self, shape: TupleShape) -> tuple:
        self._begin_explicit("tuple", len(shape.elements))
        items = self._build_elements(shape.elements)
        self._end_explicit()
        return tuple(items)

    def build_tuple_struct(self, shape: TupleStructShape) -> Any:
        self._begin_explicit(shape.name, len(shape.elements))
        items = self._build_elements(shape.elements)
        self._end_explicit()
        if shape.model is not None:
            return construct(shape.name, shape.model, *items)
        return tuple(items)

    def build_seq(self, shape: SeqShape) -> List[Any]:
        self._begin_explicit("seq")
        items = []
        while True:
            self._begin_explicit(self._slot_label(len(items)))
            if not ask_yes_no(self.transport, "Add element?"):
                self._end_explicit()
                break
            items.append(self.build(shape.element))
            self._end_explicit()
        self._end_explicit()
        return items

    def build_map(self, shape: MapShape) -> Dict[Any, Any]:
        self._begin_explicit("map")
        entries: Dict[Any, Any] = {}
        index = 0
        while True:
            self._begin_explicit(self._slot_label(index))
            index += 1
            if not ask_yes_no(self.transport, "Add entry?"):
                self._end_explicit()
                break
            key = self.build(shape.key)
            value = self.build(shape.value)
            try:
                entries[key] = value
            except TypeError as e:
                raise ValidationError(f"Map key is not hashable: {e}") from e
            self._end_explicit()
        self._end_explicit()
        return entries

    def build_struct(self, shape: StructShape) -> Any:
        self._begin_explicit(shape.name, len(shape.fields))
        values = self._build_fields(shape.fields)
        self._end_explicit()
        if shape.model is not None:
            return construct(shape.name, shape.model, **values)
        return values

    def build_enum(self, shape: EnumShape) -> Any:
        self._begin_explicit(shape.name)
        variant = self._select_variant(shape)
        # Enum members carry no data.
        if shape.model is not None and variant.form != "unit":
            raise ValidationError(
                f"{shape.model.__name__} cannot hold the payload of variant '{variant.name}'"
            )
        payload = self._build_payload(variant)
        self._end_explicit()

        if shape.model is not None:
            try:
                return shape.model[variant.name]
            except KeyError:
                raise ValidationError(
                    f"{shape.model.__name__} has no member '{variant.name}'"
                ) from None
        return EnumValue(variant=variant.name, payload=payload)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _build_elements(self, elements: List[Shape]) -> List[Any]:
        items = []
        for index, element in enumerate(elements):
            self._begin_explicit(self._element_label(index, len(elements)))
            items.append(self.build(element))
            self._end_explicit()
        return items

    def _build_fields(self, fields: Dict[str, Shape]) -> Dict[str, Any]:
        values = {}
        for name, field_shape in fields.items():
            # Closed by the completion of the field's value.
            self._begin_implicit(name, 1)
            values[name] = self.build(field_shape)
        return values

    def _select_variant(self, shape: EnumShape) -> Variant:
        if not shape.variants:
            raise ValidationError(f"Enum '{shape.name}' declares no variants")

        # A single variant is not a question worth asking.
        if len(shape.variants) == 1:
            variant = shape.variants[0]
            self.transport.respond(RequestKind.SYNTHETIC, "variant", variant.name)
            return variant

        names = shape.variant_names
        while True:
            answer = self.transport.request(RequestKind.DATUM, "variant", names)
            variant = shape.get_variant(answer)
            if variant is not None:
                return variant
            self._reject(f"Invalid variant: '{answer}'")

    def _build_payload(self, variant: Variant) -> Any:
        form = variant.form
        if form == "unit":
            return None
        if form == "newtype":
            return self.build(variant.payload)
        if form == "tuple":
            self._begin_explicit(variant.name, len(variant.payload))
            items = self._build_elements(variant.payload)
            self._end_explicit()
            if variant.model is not None:
                return construct(variant.name, variant.model, *items)
            return tuple(items)

        self._begin_explicit(variant.name, len(variant.payload))
        values = self._build_fields(variant.payload)
        self._end_explicit()
        if variant.model is not None:
            return construct(variant.name, variant.model, **values)
        return values

    def _reject(self, message: str) -> None:
        """
        Reports a rejected answer. Returns only if another answer can be
        requested.
        """
        self.transport.report(ReportKind.BAD_RESPONSE, message)
        if not self.transport.is_interactive():
            logger.debug(f"Giving up on non-interactive transport: {message}")
            raise BadResponse(message)
