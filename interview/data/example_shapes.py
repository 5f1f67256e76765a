from typing import List

from pydantic import BaseModel

from interview.domain.models import PrimitiveShape, SeqShape, StringShape, StructShape

# ==============================================================================
# MODELS
# ==============================================================================


class ChildInfo(BaseModel):
    name: str
    age: int


class ParentInfo(BaseModel):
    name: str
    age: int
    children: List[ChildInfo]


# ==============================================================================
# SHAPES
# ==============================================================================

CHILD_INFO = StructShape(
    name="ChildInfo",
    fields={
        "name": StringShape(),
        "age": PrimitiveShape("u32"),
    },
    model=ChildInfo,
)

PARENT_INFO = StructShape(
    name="ParentInfo",
    fields={
        "name": StringShape(),
        "age": PrimitiveShape("u32"),
        "children": SeqShape(CHILD_INFO),
    },
    model=ParentInfo,
)
