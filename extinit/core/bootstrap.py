"""
Wiring of the process-wide container.

``bootstrap`` runs once per process (the CLI calls it before any command);
embedding applications may instead build an ExtensionInitializer by hand.
"""

from .container import ServiceContainer, get_container
from .interfaces.handler import IExtensionHandlerManager
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .interfaces.repositories import ICoreExtensionRepository
from .registry import discover_plugins
from .settings import ExtinitSettings, load_settings

_initialized = False


def bootstrap(settings: ExtinitSettings | None = None) -> ServiceContainer:
    """
    Register the default services and the extension handler plugins.

    Later calls return the container untouched.

    Args:
        settings: Settings to wire from (default: load_settings())

    Returns:
        The process-wide container
    """
    global _initialized

    container = get_container()
    if not _initialized:
        _register_services(container, settings or load_settings())
        discover_plugins()
        _initialized = True
    return container


def _register_services(container: ServiceContainer, settings: ExtinitSettings) -> None:
    from ..presenters.console import ConsolePresenter
    from ..services.handlers.manager import DefaultExtensionHandlerManager
    from ..services.logging import ExtinitLogger
    from ..services.repositories.memory import StaticCoreExtensionRepository

    log = settings.logging

    container.register_singleton(IPresenter, implementation=ConsolePresenter())  # type: ignore[type-abstract]
    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: ExtinitLogger(
            level=log.level, console_enabled=log.console, file_enabled=log.file
        ),
    )
    container.register_singleton(
        ICoreExtensionRepository,  # type: ignore[type-abstract]
        implementation=StaticCoreExtensionRepository(settings.core.extensions),
    )
    container.register_transient(
        IExtensionHandlerManager,  # type: ignore[type-abstract]
        lambda: DefaultExtensionHandlerManager(container),
    )


def reset() -> None:
    """Drop the process-wide container and allow bootstrapping again."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
