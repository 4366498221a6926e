"""
Python module extension handler.

Activates extensions of type ``python`` by importing the module named in
their ``module`` property and calling its initialization hook.
"""

import importlib

from ...core.exceptions import ActivationError
from ...core.models.extension import InstalledExtension
from .base import BaseExtensionHandler


class PythonModuleHandler(BaseExtensionHandler):
    """
    Handler for extensions shipped as importable Python modules.

    Properties:
        module: Dotted module path to import (required)
        hook: Callable attribute called with the namespace; must exist when
            given, while the default ``initialize`` is optional
    """

    DEFAULT_HOOK = "initialize"

    @property
    def type(self) -> str:
        return "python"

    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        module_name = self.require_property(extension, "module", namespace)
        hook_name = extension.properties.get("hook", self.DEFAULT_HOOK)

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise ActivationError(
                f"Cannot import module [{module_name}] of extension [{extension}]",
                extension=str(extension.id),
                extension_type=self.type,
                namespace=namespace,
                cause=e,
            ) from e

        hook = getattr(module, hook_name, None)
        if hook is None:
            if "hook" in extension.properties:
                raise ActivationError(
                    f"Module [{module_name}] has no hook [{hook_name}]",
                    extension=str(extension.id),
                    extension_type=self.type,
                    namespace=namespace,
                )
            # Without a default hook, importing the module is the whole activation
            return
        if not callable(hook):
            raise ActivationError(
                f"Hook [{hook_name}] of module [{module_name}] is not callable",
                extension=str(extension.id),
                extension_type=self.type,
                namespace=namespace,
            )

        try:
            hook(namespace)
        except Exception as e:
            raise ActivationError(
                f"Hook [{module_name}.{hook_name}] failed: {e}",
                extension=str(extension.id),
                extension_type=self.type,
                namespace=namespace,
                cause=e,
            ) from e
