"""
Exceptions raised by extinit.

Every error carries a ``context`` dict with the identities involved
(extension, dependency, namespace, dependency chain) so a single log line
is enough to locate a failure.
"""

from __future__ import annotations


class ExtinitException(Exception):
    """
    Root of the extinit exception tree.

    Attributes:
        message: The message without context
        context: Identities and values describing the failure
        exit_code: Process status the CLI uses for this error
        recoverable: False when trying again cannot succeed
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


def root_cause_message(error: BaseException) -> str:
    """
    ``"<ClassName>: <message>"`` of the deepest exception behind ``error``.

    Walks ``__cause__``, or ``__context__`` when there is no explicit cause.
    Used for the optional dependency warning, which leaves out the trace.
    """
    seen: set[int] = set()
    root = error
    while id(root) not in seen:
        seen.add(id(root))
        nxt = root.__cause__ or root.__context__
        if nxt is None:
            break
        root = nxt

    message = root.message if isinstance(root, ExtinitException) else str(root)
    return f"{type(root).__name__}: {message}"


# Initialization


class ExtensionException(ExtinitException):
    """An extension could not be initialized in a namespace."""

    def __init__(
        self,
        message: str,
        *,
        extension: str | None = None,
        dependency: str | None = None,
        namespace: str | None = None,
        chain: str | None = None,
        context: dict | None = None,
        cause: BaseException | None = None,
    ) -> None:
        details = dict(context or {})
        for key, value in (("extension", extension), ("chain", chain), ("dependency", dependency)):
            if value:
                details[key] = value
        if namespace is not None:
            details["namespace"] = namespace
        super().__init__(message, context=details, cause=cause)
        self.extension = extension
        self.dependency = dependency
        self.namespace = namespace


class SelfDependencyError(ExtensionException):
    """
    A dependency resolved back to the extension declaring it.

    Usually an extension installed along with one of its own features.
    """

    recoverable = False


class DependencyCycleError(SelfDependencyError):
    """A dependency resolved to an extension already on the dependency chain."""


class UnsatisfiedDependencyError(ExtensionException):
    """A dependency was resolved but reported it could not be initialized."""


class DependencyInitializationError(ExtensionException):
    """A mandatory dependency failed; the failure is ``__cause__``."""


class ActivationError(ExtensionException):
    """The extension handler failed to activate an extension."""

    def __init__(self, message: str, *, extension_type: str | None = None, **kwargs) -> None:
        context = dict(kwargs.pop("context", None) or {})
        if extension_type:
            context["extension_type"] = extension_type
        super().__init__(message, context=context, **kwargs)
        self.extension_type = extension_type


class ExtensionHandlerNotFoundError(ActivationError):
    """No handler is registered for the extension type."""

    recoverable = False


# Configuration


class ExtinitConfigError(ExtinitException):
    """Invalid or unreadable configuration."""


class ConfigFileError(ExtinitConfigError):
    """A configuration file could not be read, parsed or validated."""

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: BaseException | None = None,
    ) -> None:
        details = dict(context or {})
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, context=details, cause=cause)
        self.file_path = file_path


class ManifestError(ConfigFileError):
    """The installed-extension manifest is unusable."""

    recoverable = False


# Plugins


class ExtinitPluginError(ExtinitException):
    """A handler plugin misbehaved."""


class PluginLoadError(ExtinitPluginError):
    """A handler plugin class could not be instantiated or is not a handler."""

    def __init__(
        self,
        message: str,
        *,
        plugin_name: str | None = None,
        context: dict | None = None,
        cause: BaseException | None = None,
    ) -> None:
        details = dict(context or {})
        if plugin_name:
            details["plugin_name"] = plugin_name
        super().__init__(message, context=details, cause=cause)
        self.plugin_name = plugin_name
