"""
Extension handler managers.

Dispatch the activation of an extension to the handler registered for its
type, and optionally record every activation attempt.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.container import ServiceContainer, get_container
from ...core.exceptions import ActivationError, ExtensionHandlerNotFoundError
from ...core.interfaces.handler import IExtensionHandlerManager
from ...core.interfaces.logger import ILogger
from ...core.models.extension import InstalledExtension


class DefaultExtensionHandlerManager(IExtensionHandlerManager):
    """
    Activates extensions through the handlers registered in the container.

    Follows OCP: a new extension type only needs a registered handler.
    """

    def __init__(
        self,
        container: ServiceContainer | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._container = container
        self._logger = logger

    @property
    def container(self) -> ServiceContainer:
        if self._container is None:
            self._container = get_container()
        return self._container

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ..logging import NullLogger

            self._logger = self.container.try_resolve(ILogger)  # type: ignore[type-abstract]
            if self._logger is None:
                self._logger = NullLogger()
        return self._logger

    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        """
        Activate the extension with the handler of its type.

        Raises:
            ExtensionHandlerNotFoundError: If no handler supports the type
            ActivationError: If the handler failed
        """
        try:
            handler = self.container.get_extension_handler(extension.type)
        except KeyError as e:
            raise ExtensionHandlerNotFoundError(
                f"No handler for extension type [{extension.type}]",
                extension=str(extension.id),
                extension_type=extension.type,
                namespace=namespace,
                cause=e,
            ) from e

        self.logger.debug(
            "Initializing extension [%s] with %s", extension.id, type(handler).__name__
        )

        try:
            handler.initialize(extension, namespace)
        except ActivationError:
            raise
        except Exception as e:
            raise ActivationError(
                f"Failed to initialize extension [{extension}]: {e}",
                extension=str(extension.id),
                extension_type=extension.type,
                namespace=namespace,
                cause=e,
            ) from e


@dataclass(frozen=True)
class ActivationRecord:
    """One activation attempt seen by a RecordingHandlerManager."""

    extension: InstalledExtension
    namespace: str | None
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class RecordingHandlerManager(IExtensionHandlerManager):
    """
    Records activation attempts in order, delegating when a manager is given.

    Without a delegate nothing is activated, which gives a dry run of the
    initialization order.
    """

    def __init__(self, delegate: IExtensionHandlerManager | None = None) -> None:
        self._delegate = delegate
        self.records: list[ActivationRecord] = []

    @property
    def dry_run(self) -> bool:
        return self._delegate is None

    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        """Delegate the activation and record its outcome."""
        if self._delegate is None:
            self.records.append(ActivationRecord(extension, namespace))
            return

        try:
            self._delegate.initialize(extension, namespace)
        except Exception as e:
            self.records.append(ActivationRecord(extension, namespace, e))
            raise
        self.records.append(ActivationRecord(extension, namespace))

    def failures(self) -> list[ActivationRecord]:
        """Activation attempts that raised."""
        return [record for record in self.records if not record.succeeded]
