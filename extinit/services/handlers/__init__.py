"""Handler managers dispatching extension activation."""

from .manager import ActivationRecord, DefaultExtensionHandlerManager, RecordingHandlerManager

__all__ = [
    "ActivationRecord",
    "DefaultExtensionHandlerManager",
    "RecordingHandlerManager",
]
