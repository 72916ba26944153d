import pydantic
from pydantic.alias_generators import to_camel


class WireModel(pydantic.BaseModel):
    """Base for messages exchanged with the service.

    Fields are snake_case in Python and camelCase on the wire, bytes travel as base64.
    Unknown fields sent by a newer server are kept so that a response passes through unchanged.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
