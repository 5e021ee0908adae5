"""Abstract base class for commodity catalog providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from commoditydata.models.commodity import Commodity


class BaseCatalogProvider(ABC):
    """Abstract base for all catalog providers.

    Subclasses must implement ``list_commodities``. The lookup methods default
    to scanning that list; providers with a cheaper point lookup override them
    and advertise what they support via ``capabilities()``.
    """

    @abstractmethod
    def list_commodities(self) -> list[Commodity]:
        """Fetch the full catalog with current prices."""
        ...

    def get_commodity(self, commodity_id: str) -> Commodity:
        """Get a single commodity by id."""
        raise NotImplementedError

    def get_price(self, symbol: str) -> float:
        """Get the latest price for a symbol."""
        raise NotImplementedError

    def capabilities(self) -> set[str]:
        """Return the set of supported features.

        Possible values: ``catalog``, ``details``, ``prices``.
        """
        return {"catalog"}
