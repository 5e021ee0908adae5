"""Catalog provider registry."""

from __future__ import annotations

from commoditydata.config import CatalogProviderType
from commoditydata.providers.base import BaseCatalogProvider

# Lazy registry; classes are imported on demand.
PROVIDER_CLASSES: dict[CatalogProviderType, str] = {
    CatalogProviderType.MOCK: "commoditydata.providers.mock.MockCatalogProvider",
}


def create_provider(
    provider_type: CatalogProviderType,
    **kwargs,
) -> BaseCatalogProvider:
    """Instantiate a provider by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = PROVIDER_CLASSES[provider_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BaseCatalogProvider", "PROVIDER_CLASSES", "create_provider"]
