"""Abstract factories registered by class name, one registry per product type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional


class Factory(ABC):
    """Produces objects of one class, identified by the class's name."""

    @abstractmethod
    def create(self) -> Any:
        """Return a newly created object."""

    @abstractmethod
    def class_name(self) -> str:
        """Name of the class this factory creates."""


class FactoryRegistry:
    """Set of factories looked up by the name of the class they create."""

    def __init__(self) -> None:
        self._factories: Dict[str, Factory] = {}

    def find(self, class_name: str) -> Optional[Factory]:
        """Return the factory for ``class_name``, or None if none is registered."""
        return self._factories.get(class_name)

    def create(self, class_name: str) -> Any:
        """Create an object of ``class_name``; None if no factory is registered."""
        factory = self.find(class_name)
        return None if factory is None else factory.create()

    def add(self, factory: Factory) -> None:
        """Register ``factory``; a factory already registered under its name is kept."""
        self._factories.setdefault(factory.class_name(), factory)

    def remove(self, factory: Factory) -> None:
        """Unregister the factory registered under ``factory``'s class name."""
        self._factories.pop(factory.class_name(), None)

    def clear(self) -> None:
        """Unregister every factory."""
        self._factories.clear()

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._factories


_registries: Dict[type, FactoryRegistry] = {}


def registry_for(product_type: type) -> FactoryRegistry:
    """Return the shared registry of factories producing ``product_type``."""
    registry = _registries.get(product_type)
    if registry is None:
        registry = _registries[product_type] = FactoryRegistry()
    return registry


class _ConcreteFactory(Factory):
    def __init__(self, product_type: Callable[[], Any], name: str) -> None:
        self._product_type = product_type
        self._name = name

    def create(self) -> Any:
        return self._product_type()

    def class_name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Factory({self._name})"


def concrete_factory(product_type: type) -> Factory:
    """Return a factory that default-constructs ``product_type``, named after it."""
    return _ConcreteFactory(product_type, product_type.__name__)