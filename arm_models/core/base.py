from typing import Annotated, Any, Mapping, Self, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
)
from pydantic.alias_generators import to_camel

T = TypeVar("T")

FALLBACK_TAG = "__fallback__"


def _null_as_empty(value: Any) -> Any:
    return [] if value is None else value


NULL_AS_EMPTY = BeforeValidator(_null_as_empty)

# Optional wire array: missing or null decodes to [], an empty list is not encoded.
DefaultList = Annotated[list[T], NULL_AS_EMPTY]


class ArmModel(BaseModel):
    """
    Base for every request/response body of the resource providers.

    Attributes are snake_case and map to camelCase on the wire unless a field
    declares its own alias. Optional fields left as None and empty default
    lists are dropped when encoding, so a model built up before a request only
    sends what was set.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _omit_unset(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None or (NULL_AS_EMPTY in field.metadata and not value):
                key = (field.serialization_alias or field.alias or name) if info.by_alias else name
                data.pop(key, None)
        return data

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> Self:
        return cls.model_validate(payload)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ListResult(ArmModel):
    """A page of a list operation. Subclasses declare `value` and, when the API pages, `next_link`."""

    value: list[Any]

    def continuation(self) -> str | None:
        next_link: str | None = getattr(self, "next_link", None)
        return next_link or None


def _tag_of(value: Any, attribute: str, alias: str) -> Any:
    if isinstance(value, Mapping):
        tag = value.get(alias, value.get(attribute))
    else:
        tag = getattr(value, attribute, None)
    return getattr(tag, "value", tag)


def tagged_union(
    attribute: str,
    alias: str,
    shapes: Mapping[str, type[ArmModel]],
    fallback: type[ArmModel],
) -> Any:
    """
    Build a union discriminated by a string tag at the same JSON level as the
    shape's other fields. Tags missing from `shapes` (including future ones)
    decode into `fallback`, which keeps the tag so it is encoded unchanged.
    """

    def discriminate(value: Any) -> str:
        if isinstance(value, ArmModel):
            # already built: route by class so a base instance is never re-validated as a subclass
            for tag, shape in shapes.items():
                if type(value) is shape:
                    return tag
            return FALLBACK_TAG
        tag = _tag_of(value, attribute, alias)
        return tag if tag in shapes else FALLBACK_TAG

    choices = [Annotated[shape, Tag(tag)] for tag, shape in shapes.items()]
    choices.append(Annotated[fallback, Tag(FALLBACK_TAG)])
    return Annotated[Union[tuple(choices)], Discriminator(discriminate)]
