"""Abstract repository interface (port) for Warranty persistence."""

from abc import ABC, abstractmethod

from gateway.domain.entities import Page, PageRequest, Warranty, WarrantyFilter


class WarrantyRepository(ABC):
    """Port for warranty persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, warranty_id: int) -> Warranty | None:
        """Retrieve a single warranty by its id."""
        ...

    @abstractmethod
    async def get_page(self, filters: WarrantyFilter, page: PageRequest) -> Page[Warranty]:
        """Retrieve one page of matching warranties plus the total match count."""
        ...

    @abstractmethod
    async def create(self, warranty: Warranty) -> Warranty:
        """Persist a new warranty and return it with its id."""
        ...

    @abstractmethod
    async def update(self, warranty: Warranty) -> Warranty:
        """Write every mutable column of an existing warranty."""
        ...
