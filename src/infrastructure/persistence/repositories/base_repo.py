"""Repository base classes for database operations with SQLAlchemy 2.0."""

from typing import Any, Generic, Protocol, TypeVar

from attrs import define
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_logger
from src.infrastructure.persistence.database.db_models import PitchmatchDBBase

logger = get_logger(__name__)

TDBModel = TypeVar("TDBModel", bound=PitchmatchDBBase)
TDomainModel = TypeVar("TDomainModel")


class ModelMapper(Protocol[TDBModel, TDomainModel]):
    """Protocol for bidirectional mapping between models."""

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        """Convert database model to domain model."""
        ...

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        """Convert domain model to database model."""
        ...


@define(frozen=True, slots=True)
class BaseModelMapper(Generic[TDBModel, TDomainModel]):
    """Base implementation of ModelMapper with collection mapping.

    Subclasses implement `to_domain` and `to_db` as static methods.
    """

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        raise NotImplementedError("Subclasses must implement to_domain")

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        raise NotImplementedError("Subclasses must implement to_db")

    @classmethod
    def map_collection(cls, db_models: list[TDBModel]) -> list[TDomainModel]:
        """Map a collection of DB models to domain models, preserving order."""
        return [cls.to_domain(db_model) for db_model in db_models if db_model]


class BaseRepository(Generic[TDBModel, TDomainModel]):
    """Base repository holding the session, model class and mapper."""

    def __init__(
        self,
        session: AsyncSession,
        model_class: type[TDBModel],
        mapper: ModelMapper[TDBModel, TDomainModel],
    ) -> None:
        self.session = session
        self.model_class = model_class
        self.mapper = mapper
        logger.trace(
            f"Initialized {self.__class__.__name__} for {model_class.__name__}",
        )

    # -------------------------------------------------------------------------
    # SELECT STATEMENT BUILDERS
    # -------------------------------------------------------------------------

    def select(self, *columns: Any) -> Select[tuple[Any, ...]]:
        """Create select statement for active records."""
        stmt = select(*columns) if columns else select(self.model_class)
        return stmt.where(self.model_class.is_deleted == False)  # noqa: E712

    def select_by_id(self, id_: Any) -> Select[tuple[TDBModel]]:
        """Create select statement for an active record by primary key."""
        return self.select().where(self.model_class.id == id_)

    # -------------------------------------------------------------------------
    # SHARED HELPERS
    # -------------------------------------------------------------------------

    async def _fetch_one(self, stmt: Select) -> TDBModel | None:
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def _fetch_all(self, stmt: Select) -> list[TDBModel]:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
