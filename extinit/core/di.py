"""
Fallback resolution for services that may not be registered.

Library code (the initializer, settings loading) runs without a
bootstrapped container; it asks for a service and gets a stand-in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Registered service for ``interface``, else ``default_factory()``.

    Example:
        >>> from extinit.core.interfaces.logger import ILogger
        >>> from extinit.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    service = get_container().try_resolve(interface)
    return default_factory() if service is None else service
