"""Error Envelope: the JSON body of every non-2xx response.

Invariants:
    - timestamp is local time, ISO-8601, no offset
    - status and error always present; message and validationErrors omitted when None
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Structure for API error responses."""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime = Field(default_factory=datetime.now)
    status: int = Field(examples=[404])
    error: str = Field(examples=["Not Found"])
    message: str | None = Field(None, examples=["Maker 'HP' not found"])
    validation_errors: dict[str, str] | None = Field(
        None, alias="validationErrors",
    )

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
