"""Computer Service: business rules for the computer catalog.

Invariants:
    - Every operation returns Ok(value) or Err(kind, message); nothing is raised
      for a business-rule failure
    - get(): absent/blank/"/" model -> MODEL_REQUIRED if the maker exists,
      MAKER_NOT_FOUND otherwise; unknown maker beats unknown model
    - create(): (maker, model) must be new; a unique-index violation at flush
      is the same failure as the pre-check (ALREADY_EXISTS)
    - update(): partial merge, only non-null fields overwrite; colors replaced whole
    - Never commits: the caller commits on Ok and rolls back on Err

Design Decisions:
    - Repository injected as a Protocol: tests drive the rules with in-memory fakes
"""

import logging

from sqlalchemy.exc import IntegrityError

from computer_keys.core import messages
from computer_keys.core.errors import ErrorKind
from computer_keys.core.merge_patch import merge_fields
from computer_keys.core.outcome import Err, Ok, Outcome
from computer_keys.core.repository_protocols import ComputerLike, ComputerRepository
from computer_keys.models.computer import Computer
from computer_keys.schemas.computer import ComputerPatch, ComputerPayload

logger = logging.getLogger(__name__)


def _model_missing(model: str | None) -> bool:
    return model is None or not model.strip() or model == "/"


class ComputerService:
    """CRUD over computers, keyed by (maker, model)."""

    def __init__(self, repository: ComputerRepository):
        self.repository = repository

    async def get(
        self, maker: str, model: str | None = None,
    ) -> Outcome[ComputerLike]:
        """Look up one computer, distinguishing unknown maker from missing model."""
        if _model_missing(model):
            if await self.repository.exists_by_maker(maker):
                return Err(ErrorKind.MODEL_REQUIRED, messages.MODEL_PARAMETER_REQUIRED)
            return self._maker_not_found(maker)

        if not await self.repository.exists_by_maker(maker):
            return self._maker_not_found(maker)

        computer = await self.repository.find_by_maker_model(maker, model)
        if computer is None:
            logger.warning(f"Computer {maker}/{model} not found")
            return Err(
                ErrorKind.COMPUTER_NOT_FOUND,
                messages.COMPUTER_NOT_FOUND_FOR_MAKER_AND_MODEL.format(
                    maker=maker, model=model,
                ),
            )
        return Ok(computer)

    async def list(self) -> Outcome[list[ComputerLike]]:
        """Whole catalog in id order."""
        return Ok(await self.repository.find_all())

    async def create(self, payload: ComputerPayload) -> Outcome[ComputerLike]:
        """Store a new computer; (maker, model) must not exist yet."""
        if await self.repository.exists_by_maker_model(payload.maker, payload.model):
            logger.warning(f"Computer {payload.maker}/{payload.model} already exists")
            return self._already_exists()

        computer = Computer(
            type=payload.type,
            maker=payload.maker,
            model=payload.model,
            language=payload.language,
            colors=payload.color_list,
        )
        try:
            saved = await self.repository.save(computer)
        except IntegrityError:
            logger.warning(
                f"Unique index rejected computer {payload.maker}/{payload.model}",
            )
            return self._already_exists()
        logger.info(f"Created computer {saved.id} ({saved.maker}/{saved.model})")
        return Ok(saved)

    async def update(
        self, maker: str, model: str, patch: ComputerPatch,
    ) -> Outcome[ComputerLike]:
        """Merge the non-null fields of `patch` into the computer at (maker, model)."""
        computer = await self.repository.find_by_maker_model(maker, model)
        if computer is None:
            return Err(ErrorKind.COMPUTER_NOT_FOUND, messages.COMPUTER_NOT_FOUND)

        applied = merge_fields(computer, patch.changes())
        try:
            saved = await self.repository.save(computer)
        except IntegrityError:
            logger.warning(
                f"Renaming {maker}/{model} collides with an existing computer",
            )
            return self._already_exists()
        logger.info(f"Updated computer {saved.id}: {applied}")
        return Ok(saved)

    async def delete(self, maker: str, model: str) -> Outcome[None]:
        """Remove the computer at (maker, model)."""
        computer = await self.repository.find_by_maker_model(maker, model)
        if computer is None:
            return Err(ErrorKind.COMPUTER_NOT_FOUND, messages.COMPUTER_NOT_FOUND)
        await self.repository.delete(computer)
        logger.info(f"Deleted computer {maker}/{model}")
        return Ok(None)

    @staticmethod
    def _maker_not_found(maker: str) -> Err:
        logger.warning(f"Maker {maker!r} not found")
        return Err(
            ErrorKind.MAKER_NOT_FOUND, messages.MAKER_NOT_FOUND.format(maker=maker),
        )

    @staticmethod
    def _already_exists() -> Err:
        return Err(ErrorKind.ALREADY_EXISTS, messages.COMPUTER_ALREADY_EXISTS)
