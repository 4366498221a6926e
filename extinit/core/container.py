"""
Service container for extinit.

Services are registered against their interface as dependency-injector
providers. Extension handlers live in a separate table keyed by the
extension type they activate.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .interfaces.handler import IExtensionHandler

T = TypeVar("T")


class ServiceContainer:
    """Interface -> provider table plus the extension handler table."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}
        self._handlers: dict[str, type[IExtensionHandler]] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Process-wide container, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the process-wide container."""
        cls._instance = None

    # Services

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance of a service.

        Args:
            interface: Key to resolve the service by
            implementation: Ready-made instance
            factory: Builds the instance on first resolve instead

        Raises:
            ValueError: If neither an implementation nor a factory is given
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Register a service built anew on every resolve."""
        self._providers[interface] = providers.Factory(factory)

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Replace the provider of a service, e.g. with a stub in tests."""
        self._providers[interface] = provider

    def _provider(self, interface: type) -> providers.Provider | None:
        return self._providers.get(interface)

    def resolve(self, interface: type[T]) -> T:
        """
        Get a service.

        Raises:
            KeyError: If the interface was never registered
        """
        provider = self._provider(interface)
        if provider is None:
            raise KeyError(f"No provider registered for: {interface}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Get a service, or None if the interface was never registered."""
        provider = self._provider(interface)
        return provider() if provider is not None else None

    # Extension handlers

    def register_extension_handler(
        self, extension_type: str, handler_class: type[IExtensionHandler]
    ) -> None:
        """Make ``handler_class`` activate extensions of ``extension_type``."""
        self._handlers[extension_type] = handler_class

    def get_extension_handler(self, extension_type: str) -> IExtensionHandler:
        """
        Instantiate the handler for an extension type.

        Raises:
            KeyError: If no handler is registered for the type
        """
        try:
            handler_class = self._handlers[extension_type]
        except KeyError:
            raise KeyError(f"No extension handler registered for type: {extension_type}") from None
        return handler_class()

    def list_extension_handlers(self) -> list[str]:
        """Extension types with a registered handler, in registration order."""
        return list(self._handlers)


def get_container() -> ServiceContainer:
    """Process-wide container."""
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    """Resolve from the process-wide container."""
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    """Resolve from the process-wide container, None when unregistered."""
    return get_container().try_resolve(interface)
