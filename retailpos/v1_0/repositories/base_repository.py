from typing import Any, Iterable, Optional, Type, TypeVar, Generic, Protocol, runtime_checkable
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

# --- models must expose .id ---
@runtime_checkable
class HasId(Protocol):
    id: Any  # PK column

ModelT = TypeVar("ModelT", bound=HasId)


class BaseRepository(Generic[ModelT]):
    """
    Flush-only primitives. Repositories never commit: the caller's unit of
    work decides when (and whether) changes become visible.
    """

    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def add(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        await session.flush([entity])
        return entity

    async def add_many(self, entities: Iterable[ModelT], session: AsyncSession) -> list[ModelT]:
        items = list(entities)
        session.add_all(items)
        await session.flush()
        return items

    async def get_by_id(self, id_: Any, session: AsyncSession) -> Optional[ModelT]:
        stmt: Select = select(self.model).where(self.model.id == id_)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def list_all(
        self,
        session: AsyncSession,
        *,
        order_by: Any | None = None,
    ) -> list[ModelT]:
        if order_by is None:
            order_by = self.model.id.asc()
        stmt: Select = select(self.model).order_by(order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())
