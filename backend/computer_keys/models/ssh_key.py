"""SshKey ORM: an authorized public key registered for a (server_type, server_name).

Invariants:
    - (server_type, server_name, public_key) is unique (uk_server_type_name_public)
    - idx_server_type_name backs the per-server listing
    - id is globally unique; the server scope is not part of the identity

Design Decisions:
    - public_key is Text: ssh-rsa blobs routinely exceed 255 characters
    - key_type column name keeps `type` free of the builtin on the Python side
"""

from sqlalchemy import BigInteger, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from computer_keys.db.base import Base


class SshKey(Base):
    """An authorized_keys entry."""
    __tablename__ = "ssh_keys"
    __table_args__ = (
        UniqueConstraint(
            "server_type", "server_name", "public_key",
            name="uk_server_type_name_public",
        ),
        Index("idx_server_type_name", "server_type", "server_name"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    server_type: Mapped[str] = mapped_column(String(255), nullable=False)
    server_name: Mapped[str] = mapped_column(String(255), nullable=False)
    key_type: Mapped[str] = mapped_column(String(32), nullable=False)
    public_key: Mapped[str] = mapped_column(Text, nullable=False)
    comment: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<SshKey id={self.id} server={self.server_type}/{self.server_name} "
            f"type={self.key_type}>"
        )
