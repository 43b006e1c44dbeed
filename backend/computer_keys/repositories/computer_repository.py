"""Computer Repository: primitive lookups and writes over the computers table.

Invariants:
    - find_* return None when nothing matches
    - find_all is ordered by id (insertion order)
    - save() flushes so the id is assigned and unique violations surface immediately
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from computer_keys.models.computer import Computer

logger = logging.getLogger(__name__)


class SqlComputerRepository:
    """ComputerRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_maker(self, maker: str) -> bool:
        return bool(await self.db.scalar(
            select(exists().where(Computer.maker == maker)),
        ))

    async def exists_by_maker_model(self, maker: str, model: str) -> bool:
        return bool(await self.db.scalar(
            select(exists().where(
                Computer.maker == maker, Computer.model == model,
            )),
        ))

    async def find_by_maker_model(
        self, maker: str, model: str,
    ) -> Computer | None:
        result = await self.db.execute(
            select(Computer)
            .where(Computer.maker == maker)
            .where(Computer.model == model),
        )
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Computer]:
        result = await self.db.execute(select(Computer).order_by(Computer.id))
        return list(result.scalars().all())

    async def save(self, computer: Computer) -> Computer:
        self.db.add(computer)
        await self.db.flush()
        logger.debug(f"Flushed computer {computer.id}")
        return computer

    async def delete(self, computer: Computer) -> None:
        await self.db.delete(computer)
        await self.db.flush()
