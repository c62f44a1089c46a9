"""
Custom GraphQL scalars

Types here are plain ``NewType`` annotations; their GraphQL behaviour is
registered on the schema through ``SCALAR_MAP``.
"""

from typing import NewType

import strawberry
from strawberry.types.scalar import ScalarDefinition

from ...scalars import parse_input, parse_literal, serialize_output

Date = NewType("Date", str)

DateScalar = strawberry.scalar(
    name="Date",
    description=(
        "Calendar date. Accepts loose input such as 3/23/2020 or 2020-03-23, "
        "serialized as YYYY-MM-DD."
    ),
    serialize=serialize_output,
    parse_value=parse_input,
    parse_literal=parse_literal,
)

SCALAR_MAP: dict[object, ScalarDefinition] = {
    Date: DateScalar,
}
