"""
holidaycalc Region Registry

Maps region identifiers to holiday providers.

Identifiers are matched case-insensitively ("de-sn" resolves "DE-SN").
Weekday providers are registered as "weekday:sunday" ... "weekday:saturday".

Usage:
    registry = default_registry()
    provider = registry.resolve("DE-SN")
    holidays = provider.calculate_holidays_for_year(2024)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .config import Settings
from .exceptions import RegionNotFoundError, RulePackValidationError
from .providers import HolidayProvider, all_weekday_providers

logger = logging.getLogger(__name__)


class RegionRegistry:
    """
    Registry of region providers keyed by region id.

    The registry holds no calculation state; resolving a region always returns
    the registered provider instance.
    """

    def __init__(self, providers: Iterable[HolidayProvider] = ()):
        self._providers: dict[str, HolidayProvider] = {}
        self._ids: dict[str, str] = {}
        for provider in providers:
            self.register(provider)

    @staticmethod
    def _key(region_id: str) -> str:
        return region_id.strip().upper()

    def register(
        self,
        provider: HolidayProvider,
        replace: bool = False,
        region_id: Optional[str] = None,
    ) -> HolidayProvider:
        """
        Register a provider.

        Args:
            provider: Provider to register
            replace: Overwrite an existing registration with the same id
            region_id: Id to register under (defaults to ``provider.region_id``)

        Returns:
            The registered provider

        Raises:
            ValueError: If the id is missing or already registered
            RulePackValidationError: If the provider's parent chain leads back to it
        """
        region_id = region_id or getattr(provider, "region_id", None)
        if not region_id:
            raise ValueError(f"Provider {provider!r} has no region_id")
        key = self._key(region_id)
        if key in self._providers and not replace:
            raise ValueError(f"Region '{region_id}' is already registered")
        self._check_parent_chain(region_id, provider)
        self._providers[key] = provider
        self._ids[key] = region_id
        logger.debug("Registered region %s", region_id)
        return provider

    def _check_parent_chain(self, region_id: str, provider: HolidayProvider) -> None:
        """Follow registered parent ids upwards; the chain must not reach ``region_id``."""
        chain = [region_id]
        seen = {self._key(region_id)}
        parent_id = getattr(provider, "parent_id", None)
        while parent_id is not None:
            chain.append(parent_id)
            parent_key = self._key(parent_id)
            if parent_key in seen:
                raise RulePackValidationError(
                    message=f"Parent chain of region '{region_id}' is cyclic",
                    details={"chain": chain},
                    region_id=region_id,
                )
            seen.add(parent_key)
            parent_id = getattr(self._providers.get(parent_key), "parent_id", None)

    def get(self, region_id: str) -> Optional[HolidayProvider]:
        return self._providers.get(self._key(region_id))

    def resolve(self, region_id: str) -> HolidayProvider:
        """
        Resolve a region id to its provider.

        Raises:
            RegionNotFoundError: If no provider is registered for the id
        """
        provider = self.get(region_id)
        if provider is None:
            raise RegionNotFoundError(
                message=f"Unknown region '{region_id}'",
                details={"available": self.region_ids()},
                region_id=region_id,
            )
        logger.debug("Resolved region %s", region_id)
        return provider

    def region_ids(self) -> list[str]:
        """Registered ids in registration order."""
        return list(self._ids.values())

    def providers(self) -> list[HolidayProvider]:
        return list(self._providers.values())

    def children_of(self, region_id: str) -> list[str]:
        """Ids of regions whose parent is ``region_id``."""
        key = self._key(region_id)
        children = []
        for child_key, provider in self._providers.items():
            parent_id = getattr(provider, "parent_id", None)
            if parent_id is not None and self._key(parent_id) == key:
                children.append(self._ids[child_key])
        return children

    def __contains__(self, region_id: object) -> bool:
        return isinstance(region_id, str) and self._key(region_id) in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.region_ids())


def default_registry(settings: Optional[Settings] = None) -> RegionRegistry:
    """
    Build a registry with every built-in region, weekday and rule pack.

    A new registry is built on every call. Extra pack directories come from
    ``settings.pack_paths`` (``HOLIDAYCALC_PACK_PATH`` when not given).
    """
    from .packs import BUNDLED_PACKS_DIR, RulePackLoader
    from .regions import register_builtin_regions

    settings = settings or Settings.from_env()
    registry = RegionRegistry()
    register_builtin_regions(registry)
    for provider in all_weekday_providers():
        registry.register(provider)

    loader = RulePackLoader(strict=settings.strict_packs)
    pack_dirs = [BUNDLED_PACKS_DIR, *(Path(p) for p in settings.pack_paths)]
    for directory in pack_dirs:
        for pack in loader.load_directory(directory):
            try:
                registry.register(pack.to_provider(registry), replace=True)
            except RulePackValidationError as e:
                if settings.strict_packs:
                    raise
                logger.warning("Skipping rule pack %s: %s", pack.source or pack.region_id, e)

    logger.debug("Default registry built with %d regions", len(registry))
    return registry
