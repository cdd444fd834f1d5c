"""Generic repository over entities with an integer identity.

Entities are plain pydantic models; the translation to and from their
SQLModel rows is supplied per entity by an ``EntityMapper``. The repository
keeps a unit of work on the session: every entity it hands out or is given
through ``insert_on_submit`` is tracked, and ``submit_changes`` writes all of
them back in a single commit. Repositories built on the same session share
that unit of work.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from src.storefront.core.errors import NotFoundError, PersistenceError, ValidationError

NEW_ENTITY_ID = 0

EntityT = TypeVar("EntityT")
RowT = TypeVar("RowT", bound=SQLModel)

_UNIT_OF_WORK_KEY = "storefront.unit_of_work"


class EntityMapper(Protocol[EntityT, RowT]):
    """Explicit mapping between one entity type and its table row."""

    entity_name: str
    row_type: type[RowT]
    order_by: Sequence[Any]

    def to_entity(self, row: RowT) -> EntityT: ...

    def to_row(self, entity: EntityT, row: RowT | None, session: Session) -> RowT:
        """Copy the entity onto ``row``, creating the row when it is ``None``."""
        ...

    def after_flush(self, entity: EntityT, row: RowT) -> None:
        """Write store-assigned identities back onto the entity."""
        ...


@dataclass
class _Tracked:
    entity: Any
    row: Any
    mapper: Any
    is_new: bool


def _unit_of_work(session: Session) -> list[_Tracked]:
    return session.info.setdefault(_UNIT_OF_WORK_KEY, [])


class Repository(Generic[EntityT, RowT]):
    """Data-access layer for one entity type."""

    def __init__(self, session: Session, mapper: EntityMapper[EntityT, RowT]) -> None:
        self._session = session
        self._mapper = mapper

    @property
    def session(self) -> Session:
        return self._session

    def get_by_id(self, entity_id: int) -> EntityT:
        row = self._session.get(self._mapper.row_type, entity_id)
        if row is None:
            raise NotFoundError(self._mapper.entity_name, entity_id)
        return self._track(row)

    def list_all(self) -> list[EntityT]:
        statement = select(self._mapper.row_type).order_by(*self._mapper.order_by)
        return self._track_all(self._session.exec(statement).all())

    def insert_on_submit(self, entity: EntityT) -> None:
        """Stage a new entity; nothing reaches the store until ``submit_changes``."""
        _unit_of_work(self._session).append(
            _Tracked(entity=entity, row=None, mapper=self._mapper, is_new=True)
        )

    def submit_changes(self) -> None:
        """Persist every tracked entity of the unit of work in one transaction."""
        tracked = _unit_of_work(self._session)
        try:
            for entry in tracked:
                entry.row = entry.mapper.to_row(entry.entity, entry.row, self._session)
                self._session.add(entry.row)
            self._session.flush()
            for entry in tracked:
                entry.mapper.after_flush(entry.entity, entry.row)
            self._session.commit()
        except IntegrityError as exc:
            self._discard(tracked)
            logger.warning("Unit of work rejected by the store: {}", exc.orig)
            raise ValidationError(f"Constraint violation: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            self._discard(tracked)
            logger.error(
                "Database transaction failed",
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise PersistenceError(f"Could not save changes: {exc}") from exc

        for entry in tracked:
            entry.is_new = False
        logger.debug("Committed unit of work with {} tracked entities", len(tracked))

    def _discard(self, tracked: list[_Tracked]) -> None:
        self._session.rollback()
        for entry in tracked:
            if entry.is_new:
                entry.row = None
                entry.entity.id = NEW_ENTITY_ID

    def _track(self, row: RowT) -> EntityT:
        tracked = _unit_of_work(self._session)
        for entry in tracked:
            if entry.row is row:
                return entry.entity
        entity = self._mapper.to_entity(row)
        tracked.append(_Tracked(entity=entity, row=row, mapper=self._mapper, is_new=False))
        return entity

    def _track_all(self, rows: Sequence[RowT]) -> list[EntityT]:
        return [self._track(row) for row in rows]
