"""SSH Key Schemas: the {"ssh-key": {...}} request envelope and the flat response.

Invariants:
    - Wire name `public` <-> internal public_key, both directions
    - Request bodies are wrapped in "ssh-key"; responses are never wrapped
    - type must match ^(ssh-rsa|ssh-ed25519)$ whenever it is given
    - SshKeyRequest requires type and public; SshKeyUpdateRequest requires neither
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from computer_keys.core import messages
from computer_keys.core.domain_types import SSH_KEY_TYPE_PATTERN
from computer_keys.core.repository_protocols import SshKeyLike
from computer_keys.schemas._validators import require_text


def _check_type(v: str | None) -> str | None:
    require_text(v, messages.VALIDATION_SSH_KEY_TYPE_REQUIRED)
    if v is not None and not SSH_KEY_TYPE_PATTERN.match(v):
        raise PydanticCustomError(
            "ssh_key_type", messages.VALIDATION_SSH_KEY_TYPE_INVALID,
        )
    return v


class SshKeyBody(BaseModel):
    """Inner ssh-key object of a create request."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(examples=["ssh-ed25519"])
    public_key: str = Field(
        alias="public",
        examples=["AAAAC3NzaC1lZDI1NTE5AAAAIOiKKC7lLUcyvJMo1gjvMr56XvOq814Hhin0OCYFDqT4"],
    )
    comment: str | None = Field(None, examples=["happy@isr"])

    @field_validator("type")
    @classmethod
    def type_matches_pattern(cls, v: str) -> str:
        return _check_type(v)

    @field_validator("public_key")
    @classmethod
    def public_not_blank(cls, v: str) -> str:
        return require_text(v, messages.VALIDATION_PUBLIC_KEY_REQUIRED)


class SshKeyPatchBody(BaseModel):
    """Inner ssh-key object of an update request; absent fields are left unchanged."""
    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    public_key: str | None = Field(None, alias="public")
    comment: str | None = None

    @field_validator("type")
    @classmethod
    def type_matches_pattern(cls, v: str | None) -> str | None:
        return _check_type(v)

    @field_validator("public_key")
    @classmethod
    def public_not_blank(cls, v: str | None) -> str | None:
        return require_text(v, messages.VALIDATION_PUBLIC_KEY_REQUIRED)


class SshKeyRequest(BaseModel):
    """POST body: {"ssh-key": {"type", "public", "comment"}}."""
    model_config = ConfigDict(populate_by_name=True)

    ssh_key: SshKeyBody = Field(alias="ssh-key")


class SshKeyUpdateRequest(BaseModel):
    """PUT body: {"ssh-key": {...}} with every inner field optional."""
    model_config = ConfigDict(populate_by_name=True)

    ssh_key: SshKeyPatchBody = Field(alias="ssh-key")

    def changes(self) -> dict[str, object]:
        """Field -> new value for the ORM record; None means untouched."""
        return {
            "key_type": self.ssh_key.type,
            "public_key": self.ssh_key.public_key,
            "comment": self.ssh_key.comment,
        }


class SshKeyResponse(BaseModel):
    """Stored key as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    public_key: str = Field(alias="public")
    comment: str | None = None
    server_type: str = Field(alias="serverType")
    server_name: str = Field(alias="serverName")

    @classmethod
    def from_entity(cls, ssh_key: SshKeyLike) -> "SshKeyResponse":
        return cls(
            id=ssh_key.id,
            type=ssh_key.key_type,
            public_key=ssh_key.public_key,
            comment=ssh_key.comment,
            server_type=ssh_key.server_type,
            server_name=ssh_key.server_name,
        )


SSH_KEY_REQUIRED_MESSAGES = {
    "ssh-key": messages.VALIDATION_SSH_KEY_REQUIRED,
    "type": messages.VALIDATION_SSH_KEY_TYPE_REQUIRED,
    "public": messages.VALIDATION_PUBLIC_KEY_REQUIRED,
}
