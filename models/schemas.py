from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError

MAX_WEIGHT = 2**31 - 1  # INTEGER column


class Item(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        revalidate_instances="always",
    )

    label: StrictStr = Field(min_length=1, max_length=255)
    weight: StrictInt = Field(ge=1, le=MAX_WEIGHT)

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, value: str) -> str:
        # stored exactly as given; only whitespace-only labels are refused
        if not value.strip():
            raise ValueError("label must not be blank")
        return value


def _describe(index: int, exc: PydanticValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"]) or "item"
    return f"Invalid item at index {index} ({field}): {err['msg']}"


def parse_items(raw) -> list[Item]:
    """
    Validates a raw payload (list of dicts or Items) into an ordered item list.
    Raises ValidationError on anything that is not a non-empty array of
    {label, weight} entries with weight >= 1.
    """
    if not isinstance(raw, (list, tuple)) or not raw:
        raise ValidationError("Invalid items list: expected a non-empty array.")

    items = []
    for index, entry in enumerate(raw):
        try:
            items.append(Item.model_validate(entry))
        except PydanticValidationError as e:
            raise ValidationError(_describe(index, e)) from e
    return items
