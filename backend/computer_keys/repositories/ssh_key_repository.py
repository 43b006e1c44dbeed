"""SSH Key Repository: primitive lookups and writes over the ssh_keys table.

Invariants:
    - find_by_server is ordered by id
    - delete_by_id is a no-op for unknown ids (callers check existence first)
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from computer_keys.core.domain_types import SshKeyId
from computer_keys.models.ssh_key import SshKey


class SqlSshKeyRepository:
    """SshKeyRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_server_and_public_key(
        self, server_type: str, server_name: str, public_key: str,
    ) -> bool:
        return bool(await self.db.scalar(
            select(exists().where(
                SshKey.server_type == server_type,
                SshKey.server_name == server_name,
                SshKey.public_key == public_key,
            )),
        ))

    async def find_by_server(
        self, server_type: str, server_name: str,
    ) -> list[SshKey]:
        result = await self.db.execute(
            select(SshKey)
            .where(SshKey.server_type == server_type)
            .where(SshKey.server_name == server_name)
            .order_by(SshKey.id),
        )
        return list(result.scalars().all())

    async def find_by_id(self, key_id: SshKeyId) -> SshKey | None:
        return await self.db.get(SshKey, key_id)

    async def save(self, ssh_key: SshKey) -> SshKey:
        self.db.add(ssh_key)
        await self.db.flush()
        return ssh_key

    async def delete_by_id(self, key_id: SshKeyId) -> None:
        await self.db.execute(delete(SshKey).where(SshKey.id == key_id))
        await self.db.flush()
