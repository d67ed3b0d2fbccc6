"""Application service (use case) for Warranty operations."""

import logging

from gateway.application.interfaces import WarrantyRepository
from gateway.application.schemas.warranty import (
    WarrantyCreate,
    WarrantyDeactivate,
    WarrantyUpdate,
)
from gateway.domain.entities import AuditActor, Page, PageRequest, Warranty, WarrantyFilter
from gateway.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_AUDIT_FIELDS = {"user_updated_name", "user_updated_id", "user_updated_img"}

# Columns a caller may clear by sending an explicit null; for the others a
# null is treated as "not sent".
_CLEARABLE_FIELDS = frozenset({
    "customer_email",
    "customer_cellphone",
    "products_relation_ids",
    "notes_relation_ids",
})


class WarrantyService:
    """Orchestrates warranty CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: WarrantyRepository, max_page_limit: int = 20):
        self._repository = repository
        self._max_page_limit = max_page_limit

    async def get_warranty(self, warranty_id: int) -> Warranty:
        warranty = await self._repository.get_by_id(warranty_id)
        if warranty is None:
            raise EntityNotFoundError("Warranty", warranty_id)
        return warranty

    async def list_warranties(
        self, filters: WarrantyFilter, page: PageRequest
    ) -> Page[Warranty]:
        return await self._repository.get_page(filters, page.clamped(self._max_page_limit))

    async def create_warranty(self, data: WarrantyCreate) -> Warranty:
        warranty = Warranty(**data.model_dump())
        created = await self._repository.create(warranty)
        logger.info("Created warranty %s for customer %s", created.id, created.customer_id)
        return created

    async def update_warranty(self, warranty_id: int, data: WarrantyUpdate) -> Warranty:
        warranty = await self.get_warranty(warranty_id)

        changes = {
            name: value
            for name, value in data.model_dump(exclude_unset=True, exclude=_AUDIT_FIELDS).items()
            if value is not None or name in _CLEARABLE_FIELDS
        }
        actor = AuditActor(
            id=data.user_updated_id,
            name=data.user_updated_name,
            image=data.user_updated_img,
        )
        warranty.apply_changes(changes, actor)
        return await self._repository.update(warranty)

    async def deactivate_warranty(
        self, warranty_id: int, data: WarrantyDeactivate | None = None
    ) -> Warranty:
        warranty = await self.get_warranty(warranty_id)
        data = data or WarrantyDeactivate()
        warranty.deactivate(
            AuditActor(
                id=data.user_updated_id,
                name=data.user_updated_name,
                image=data.user_updated_img,
            )
        )
        updated = await self._repository.update(warranty)
        logger.info("Deactivated warranty %s", warranty_id)
        return updated
