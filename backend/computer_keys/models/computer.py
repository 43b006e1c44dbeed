"""Computer ORM: catalog record identified by (maker, model).

Invariants:
    - (maker, model) is unique (uk_maker_model)
    - type, maker, model are non-nullable; language is optional
    - colors is an ordered list, never NULL (empty list when absent)

Design Decisions:
    - JSON column for colors: order is preserved by the array itself and the
      resource stays a single table
    - colors is reassigned whole on update, so plain JSON change detection suffices
"""

from sqlalchemy import BigInteger, Index, Integer, JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from computer_keys.db.base import Base


class Computer(Base):
    """A computer in the catalog."""
    __tablename__ = "computers"
    __table_args__ = (
        UniqueConstraint("maker", "model", name="uk_maker_model"),
        Index("idx_maker_model", "maker", "model"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    maker: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str | None] = mapped_column(String(255), nullable=True)
    colors: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Computer id={self.id} maker={self.maker!r} model={self.model!r}>"
