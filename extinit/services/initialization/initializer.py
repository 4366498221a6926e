"""
Extension initializer service.

Initializes the installed extensions, dependencies first, in every
namespace they apply to.
"""

from __future__ import annotations

from ...core.container import ServiceContainer, get_container
from ...core.exceptions import (
    DependencyCycleError,
    DependencyInitializationError,
    ExtensionException,
    SelfDependencyError,
    UnsatisfiedDependencyError,
    root_cause_message,
)
from ...core.interfaces.handler import IExtensionHandlerManager
from ...core.interfaces.logger import ILogger
from ...core.interfaces.repositories import (
    ICoreExtensionRepository,
    IInstalledExtensionRepository,
)
from ...core.models.extension import ExtensionDependency, InstalledExtension
from .context import DependencyChainContext
from .state import InitializationState


class ExtensionInitializer:
    """
    Initializes installed extensions through the handler manager.

    Each top-level ``initialize`` call walks the installed extensions
    depth-first: the dependencies of an extension are initialized in the
    same namespace before the extension itself, and an extension is handed
    to the handler manager at most once per namespace during the call.
    Failures are logged; one broken extension never stops the others.
    """

    def __init__(
        self,
        installed_repository: IInstalledExtensionRepository,
        handler_manager: IExtensionHandlerManager,
        core_repository: ICoreExtensionRepository,
        logger: ILogger | None = None,
    ):
        """
        Initialize with the collaborators to read from and delegate to.

        Args:
            installed_repository: Local repository listing installed extensions
            handler_manager: Performs the actual activation of an extension
            core_repository: Tells which dependencies the core already provides
            logger: Logger for internal diagnostics
        """
        self._installed = installed_repository
        self._handlers = handler_manager
        self._core = core_repository
        self._logger = logger

    @classmethod
    def from_container(
        cls,
        installed_repository: IInstalledExtensionRepository,
        handler_manager: IExtensionHandlerManager | None = None,
        container: ServiceContainer | None = None,
    ) -> ExtensionInitializer:
        """
        Create an initializer wired with the services of a bootstrapped container.

        Args:
            installed_repository: Local repository listing installed extensions
            handler_manager: Overrides the container's handler manager
            container: Container to resolve from (default: global container)

        Raises:
            KeyError: If the container lacks a required service
        """
        container = container or get_container()
        return cls(
            installed_repository,
            handler_manager or container.resolve(IExtensionHandlerManager),  # type: ignore[type-abstract]
            container.resolve(ICoreExtensionRepository),  # type: ignore[type-abstract]
            logger=container.try_resolve(ILogger),  # type: ignore[type-abstract]
        )

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def initialize(self, namespace: str | None = None, type: str | None = None) -> None:
        """
        Initialize installed extensions.

        Args:
            namespace: Only initialize extensions installed in this namespace.
                Extensions installed on root only are skipped when a namespace
                is given; with None every extension is initialized in every
                namespace it is installed in.
            type: Only initialize extensions of this type
        """
        state = InitializationState()

        if namespace is not None:
            installed_extensions = self._installed.get_installed_extensions(namespace)
        else:
            installed_extensions = self._installed.get_installed_extensions()

        self.logger.debug(
            "Initializing %d installed extension(s): namespace=%s, type=%s",
            len(installed_extensions),
            namespace,
            type,
        )

        for extension in installed_extensions:
            if type is not None and type != extension.type:
                continue

            try:
                self._initialize_extension(extension, namespace, state)
            except ExtensionException as e:
                self.logger.error(
                    "Failed to initialize local extension [%s]: %s", extension.id, e, exc_info=True
                )
            except Exception as e:
                self.logger.error(
                    "Unexpected error initializing local extension [%s]: %s",
                    extension.id,
                    e,
                    exc_info=True,
                )

        failed = [
            f"{extension_id}@{ns or '<root>'}"
            for ns, extension_id, initialized in state.items()
            if not initialized
        ]
        self.logger.debug(
            "Initialization finished: %d outcome(s) across namespaces %s, failed: %s",
            len(state),
            state.namespaces(),
            ", ".join(failed) or "none",
        )

    def _initialize_extension(
        self,
        extension: InstalledExtension,
        namespace: str | None,
        state: InitializationState,
    ) -> None:
        """Initialize an extension in the namespaces selected for this call."""
        if extension.namespaces is not None:
            if namespace is None:
                for extension_namespace in sorted(extension.namespaces):
                    self._initialize_in_namespace(
                        extension, extension_namespace, state, DependencyChainContext()
                    )
            elif namespace in extension.namespaces:
                self._initialize_in_namespace(extension, namespace, state, DependencyChainContext())
        elif namespace is None:
            self._initialize_in_namespace(extension, None, state, DependencyChainContext())

    def _initialize_in_namespace(
        self,
        extension: InstalledExtension,
        namespace: str | None,
        state: InitializationState,
        context: DependencyChainContext,
    ) -> bool:
        """
        Initialize an extension and its dependencies in a namespace.

        Returns:
            True if the extension is initialized, False if it is not
            applicable in the namespace or failed earlier in this call

        Raises:
            ExtensionException: If the extension or a mandatory dependency
                failed to initialize
        """
        # Check if the extension can be available from this namespace
        if not extension.is_valid(namespace):
            return False

        if namespace is not None and extension.namespaces is None:
            # Installed on root namespace only: initialize it there once
            return self._initialize_in_namespace(extension, None, state, context)

        initialized = state.get(namespace, extension.id)
        if initialized is not None:
            return initialized

        initialized = False
        try:
            for dependency in extension.dependencies:
                self._initialize_dependency(extension, dependency, namespace, state, context)

            # A dependency may have been another record with the same id
            recorded = state.get(namespace, extension.id)
            if recorded is not None:
                initialized = recorded
                return initialized

            self.logger.debug(
                "Activating extension [%s] in namespace [%s] at dependency depth %d",
                extension.id,
                namespace,
                context.depth,
            )
            self._handlers.initialize(extension, namespace)

            initialized = True
        finally:
            # Remember the outcome so the extension is never tried twice
            state.record(namespace, extension.id, initialized)

        return initialized

    def _initialize_dependency(
        self,
        extension: InstalledExtension,
        dependency: ExtensionDependency,
        namespace: str | None,
        state: InitializationState,
        context: DependencyChainContext,
    ) -> None:
        if self._core.exists(dependency.id):
            return

        dependency_extension = self._installed.get_installed_extension(dependency.id, namespace)
        if dependency_extension is None:
            return

        dependency_context = context.derive(extension, dependency)

        if dependency_extension is extension:
            raise SelfDependencyError(
                f"Extension [{extension}] has itself as a dependency ([{dependency}]). "
                "It usually means an extension is installed along with one of its features.",
                extension=str(extension.id),
                dependency=str(dependency),
                namespace=namespace,
                chain=dependency_context.describe(),
            )
        if context.contains(dependency_extension):
            raise DependencyCycleError(
                f"Extension [{extension}] depends on [{dependency_extension}] "
                "which is already being initialized on the same chain.",
                extension=str(extension.id),
                dependency=str(dependency),
                namespace=namespace,
                chain=dependency_context.describe(),
            )

        try:
            if not self._initialize_in_namespace(
                dependency_extension, namespace, state, dependency_context
            ):
                raise UnsatisfiedDependencyError(
                    f"Extension [{extension}] cannot be initialized because its "
                    f"dependency ([{dependency}]) could not.",
                    extension=str(extension.id),
                    dependency=str(dependency),
                    namespace=namespace,
                )
        except Exception as e:
            if dependency.optional:
                self.logger.warning(
                    "Failed to initialize dependency [%s]: %s", dependency, root_cause_message(e)
                )
            else:
                raise DependencyInitializationError(
                    f"Failed to initialize dependency [{dependency}] of extension [{extension}]",
                    extension=str(extension.id),
                    dependency=str(dependency),
                    namespace=namespace,
                    chain=dependency_context.describe(),
                    cause=e,
                ) from e
