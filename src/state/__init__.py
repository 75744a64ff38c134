from .runtime import RuntimeDeps
from .session import Session, SessionSnapshot
from .settings import AppSettings
from .envelope import ErrorInfo, RequestEnvelope, ResponseEnvelope

__all__ = [
    "AppSettings",
    "ErrorInfo",
    "RequestEnvelope",
    "ResponseEnvelope",
    "RuntimeDeps",
    "Session",
    "SessionSnapshot",
]
