"""Computer Schemas: the single internal computer record and its partial-update variant.

Invariants:
    - ComputerPayload: type, maker, model required and non-blank
    - ComputerPatch: every field optional; provided type/maker/model must be non-blank
    - colors is always {"color": [...]} on the JSON side; the wrapper is a
      representation artifact, the domain only sees the list

Design Decisions:
    - One record for both encodings: codec/computer_codec.py maps XML onto the same
      dict shape before validation
"""

from pydantic import BaseModel, Field, field_validator

from computer_keys.core import messages
from computer_keys.schemas._validators import require_text


class ColorsWrapper(BaseModel):
    """{"color": [...]} wrapper around the ordered color list."""
    color: list[str] | None = Field(
        None, examples=[["black", "silver"]],
    )


class ComputerPayload(BaseModel):
    """Computer representation used for create requests and all responses."""
    type: str = Field(examples=["laptop"])
    maker: str = Field(examples=["ASUS"])
    model: str = Field(examples=["X507UA"])
    language: str | None = Field(None, examples=["日本語"])
    colors: ColorsWrapper | None = None

    @field_validator("type")
    @classmethod
    def type_not_blank(cls, v: str) -> str:
        return require_text(v, messages.VALIDATION_TYPE_REQUIRED)

    @field_validator("maker")
    @classmethod
    def maker_not_blank(cls, v: str) -> str:
        return require_text(v, messages.VALIDATION_MAKER_REQUIRED)

    @field_validator("model")
    @classmethod
    def model_not_blank(cls, v: str) -> str:
        return require_text(v, messages.VALIDATION_MODEL_REQUIRED)

    @property
    def color_list(self) -> list[str]:
        if self.colors is None or self.colors.color is None:
            return []
        return list(self.colors.color)

    def to_json(self) -> dict:
        """JSON shape; language omitted when absent, colors always present."""
        data = {"type": self.type, "maker": self.maker, "model": self.model}
        if self.language is not None:
            data["language"] = self.language
        data["colors"] = {"color": self.color_list}
        return data


class ComputerPatch(BaseModel):
    """Partial update: only non-null fields replace the stored values."""
    type: str | None = None
    maker: str | None = None
    model: str | None = None
    language: str | None = None
    colors: ColorsWrapper | None = None

    @field_validator("type")
    @classmethod
    def type_not_blank(cls, v: str | None) -> str | None:
        return require_text(v, messages.VALIDATION_TYPE_REQUIRED)

    @field_validator("maker")
    @classmethod
    def maker_not_blank(cls, v: str | None) -> str | None:
        return require_text(v, messages.VALIDATION_MAKER_REQUIRED)

    @field_validator("model")
    @classmethod
    def model_not_blank(cls, v: str | None) -> str | None:
        return require_text(v, messages.VALIDATION_MODEL_REQUIRED)

    def changes(self) -> dict[str, object]:
        """Field -> new value for the ORM record; colors unwrapped, None means untouched."""
        return {
            "type": self.type,
            "maker": self.maker,
            "model": self.model,
            "language": self.language,
            "colors": self.colors.color if self.colors else None,
        }


COMPUTER_REQUIRED_MESSAGES = {
    "type": messages.VALIDATION_TYPE_REQUIRED,
    "maker": messages.VALIDATION_MAKER_REQUIRED,
    "model": messages.VALIDATION_MODEL_REQUIRED,
}
