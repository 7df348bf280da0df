"""Shared pydantic configuration for POS API payloads."""

from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _amount_to_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Currency amounts stay Decimal in Python and travel as JSON numbers.
Amount = Annotated[Decimal, PlainSerializer(_amount_to_number, when_used="json")]


class CamelModel(BaseModel):
    """The POS API speaks camelCase JSON; Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
