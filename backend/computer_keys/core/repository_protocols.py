"""Boundary Protocols: contracts between the services and persistence.

Invariants:
    - Services depend on these Protocols, never on a concrete repository
    - Lookups return None / False for "not found"; absence is not an error here
    - save() assigns the id of a new record and flushes pending changes of a loaded one
    - Storage-level uniqueness violations surface as sqlalchemy IntegrityError from save()

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Async in Protocol: implementations do IO, the suspension points are exactly
      these calls
"""

from typing import Protocol

from computer_keys.core.domain_types import ComputerId, SshKeyId


class ComputerLike(Protocol):
    """Structural contract for a stored computer record."""
    id: ComputerId
    type: str
    maker: str
    model: str
    language: str | None
    colors: list[str]


class SshKeyLike(Protocol):
    """Structural contract for a stored authorized key."""
    id: SshKeyId
    server_type: str
    server_name: str
    key_type: str
    public_key: str
    comment: str | None


class ComputerRepository(Protocol):
    """Contract for computer persistence."""
    async def exists_by_maker(self, maker: str) -> bool: ...
    async def exists_by_maker_model(self, maker: str, model: str) -> bool: ...
    async def find_by_maker_model(
        self, maker: str, model: str,
    ) -> ComputerLike | None: ...
    async def find_all(self) -> list[ComputerLike]: ...
    async def save(self, computer: ComputerLike) -> ComputerLike: ...
    async def delete(self, computer: ComputerLike) -> None: ...


class SshKeyRepository(Protocol):
    """Contract for authorized key persistence."""
    async def exists_by_server_and_public_key(
        self, server_type: str, server_name: str, public_key: str,
    ) -> bool: ...
    async def find_by_server(
        self, server_type: str, server_name: str,
    ) -> list[SshKeyLike]: ...
    async def find_by_id(self, key_id: SshKeyId) -> SshKeyLike | None: ...
    async def save(self, ssh_key: SshKeyLike) -> SshKeyLike: ...
    async def delete_by_id(self, key_id: SshKeyId) -> None: ...
