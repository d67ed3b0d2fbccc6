"""Concrete repository implementation for Warranty backed by SQLAlchemy."""

from dataclasses import fields

from sqlalchemy.ext.asyncio import AsyncSession

from gateway.application.interfaces import WarrantyRepository
from gateway.domain.entities import Page, PageRequest, Warranty, WarrantyFilter
from gateway.infrastructure.database.models import WarrantyModel
from gateway.infrastructure.database.query_filters import warranty_query

_COLUMNS = tuple(f.name for f in fields(Warranty))


class SQLAlchemyWarrantyRepository(WarrantyRepository):
    """Implements the WarrantyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: WarrantyModel) -> Warranty:
        """Map ORM model → domain entity."""
        return Warranty(**{name: getattr(model, name) for name in _COLUMNS})

    def _to_model(self, entity: Warranty) -> WarrantyModel:
        """Map domain entity → ORM model (for creation)."""
        values = {name: getattr(entity, name) for name in _COLUMNS if name != "id"}
        return WarrantyModel(**values)

    async def get_by_id(self, warranty_id: int) -> Warranty | None:
        result = await self._session.get(WarrantyModel, warranty_id)
        return self._to_entity(result) if result else None

    async def get_page(self, filters: WarrantyFilter, page: PageRequest) -> Page[Warranty]:
        query = warranty_query(filters, page)
        total = (await self._session.execute(query.count)).scalar_one()
        result = await self._session.execute(query.page)
        return Page(
            request=page,
            total=int(total),
            items=[self._to_entity(row) for row in result.scalars().all()],
        )

    async def create(self, warranty: Warranty) -> Warranty:
        model = self._to_model(warranty)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, warranty: Warranty) -> Warranty:
        model = await self._session.get(WarrantyModel, warranty.id)
        if model is None:
            raise ValueError(f"Warranty {warranty.id} not found in database")
        for name in _COLUMNS:
            if name != "id":
                setattr(model, name, getattr(warranty, name))
        await self._session.flush()
        return self._to_entity(model)
