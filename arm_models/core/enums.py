from enum import StrEnum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class OpenEnum(StrEnum):
    """
    String enum that accepts values it was not generated with.

    Resource providers add new states and kinds without bumping the api-version,
    so decoding must never fail on an unrecognised string. An unknown value
    decodes to a member that is not part of the class' member map but keeps the
    original string, and encodes back to exactly that string:

        >>> state = ProvisioningState("Migrating")
        >>> state.is_known, state.value
        (False, 'Migrating')
    """

    @classmethod
    def _missing_(cls, value: object) -> "OpenEnum | None":
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "UNKNOWN_VALUE"
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._value_ in type(self)._value2member_map_

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # pydantic's built-in enum validator rejects values outside the member map
        return core_schema.no_info_plain_validator_function(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value,
                return_schema=core_schema.str_schema(),
            ),
        )
