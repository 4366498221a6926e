"""
Discovery of extension handler plugins.

Handlers come from two places:
1. Modules of the ``extinit.plugins.handlers`` package
2. The ``extinit.handlers`` entry point group of installed distributions

Each concrete IExtensionHandler found is registered under its ``type``.
A broken plugin is logged and skipped; it never prevents startup.
"""

import importlib
import inspect
import pkgutil
from collections.abc import Iterator
from importlib.metadata import entry_points

from .container import ServiceContainer, get_container
from .di import resolve_or_default
from .exceptions import PluginLoadError
from .interfaces.handler import IExtensionHandler
from .interfaces.logger import ILogger

ENTRY_POINT_GROUP = "extinit.handlers"
BUILTIN_PACKAGE = "extinit.plugins.handlers"


def _log() -> ILogger:
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def _is_handler_class(obj: object) -> bool:
    """Concrete IExtensionHandler subclass, excluding the interface itself."""
    return (
        inspect.isclass(obj)
        and issubclass(obj, IExtensionHandler)
        and obj is not IExtensionHandler
        and not inspect.isabstract(obj)
    )


def _register_handler(container: ServiceContainer, cls: type[IExtensionHandler]) -> None:
    """
    Register ``cls`` under the type reported by an instance of it.

    Raises:
        PluginLoadError: If the class cannot be instantiated or has no type
    """
    try:
        extension_type = cls().type
    except Exception as e:
        raise PluginLoadError(
            f"Cannot load handler plugin {cls.__module__}.{cls.__name__}",
            plugin_name=cls.__name__,
            cause=e,
        ) from e
    container.register_extension_handler(extension_type, cls)


def _register_quietly(container: ServiceContainer, cls: type[IExtensionHandler]) -> None:
    try:
        _register_handler(container, cls)
    except PluginLoadError as e:
        _log().warning("Skipping handler plugin: %s", e)


def _builtin_handler_classes(package_name: str) -> Iterator[type[IExtensionHandler]]:
    try:
        package = importlib.import_module(package_name)
    except ImportError as e:
        _log().debug("Handler package %s not importable: %s", package_name, e)
        return

    for module_info in pkgutil.iter_modules(getattr(package, "__path__", [])):
        if module_info.name.startswith("_") or module_info.name == "base":
            continue
        try:
            module = importlib.import_module(f"{package_name}.{module_info.name}")
        except ImportError as e:
            _log().warning("Cannot import handler module %s: %s", module_info.name, e)
            continue

        for _name, obj in inspect.getmembers(module, _is_handler_class):
            # Skip handlers imported from elsewhere
            if obj.__module__ == module.__name__:
                yield obj


def _entry_point_handler_classes() -> Iterator[type[IExtensionHandler]]:
    """
    Handlers published by other distributions, e.g. in their pyproject.toml:

        [project.entry-points."extinit.handlers"]
        jar = "my_package.handlers:JarExtensionHandler"
    """
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            obj = ep.load()
        except Exception as e:
            _log().warning("Cannot load handler entry point %s: %s", ep.name, e)
            continue

        if _is_handler_class(obj):
            yield obj
        else:
            _log().warning("Entry point %s is not an extension handler", ep.name)


def discover_plugins(package_name: str = BUILTIN_PACKAGE) -> None:
    """
    Register built-in and entry point handlers with the global container.

    Args:
        package_name: Package whose modules hold the built-in handlers
    """
    container = get_container()
    for cls in _builtin_handler_classes(package_name):
        _register_quietly(container, cls)
    for cls in _entry_point_handler_classes():
        _register_quietly(container, cls)


def register_plugin(cls: type) -> type:
    """
    Class decorator registering a handler with the global container.

        @register_plugin
        class JarExtensionHandler(BaseExtensionHandler):
            ...

    Raises:
        PluginLoadError: If ``cls`` is not a concrete handler or cannot be
            instantiated
    """
    if not _is_handler_class(cls):
        raise PluginLoadError(
            f"{cls.__name__} is not a concrete IExtensionHandler", plugin_name=cls.__name__
        )
    _register_handler(get_container(), cls)
    return cls
