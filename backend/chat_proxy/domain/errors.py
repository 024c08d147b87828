from __future__ import annotations

from typing import Optional


class ChatProxyError(Exception):
    """
    Error terminal para el request.
    `message` es lo único que ve el cliente.
    """
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MethodNotAllowed(ChatProxyError):
    status_code = 405
    message = "Method not allowed"


class RateLimited(ChatProxyError):
    status_code = 429
    message = "Too many requests. Please slow down."


class ServerMisconfigured(ChatProxyError):
    status_code = 500
    message = "Server configuration error"


class InvalidFormat(ChatProxyError):
    status_code = 400
    message = "Invalid message format"


class InvalidContent(ChatProxyError):
    status_code = 400
    message = "Invalid message content"


class MessageTooLong(ChatProxyError):
    status_code = 400

    def __init__(self, max_chars: int = 500):
        super().__init__(f"Message too long. Maximum {max_chars} characters.")
        self.max_chars = max_chars


class UpstreamFailure(ChatProxyError):
    """
    Falla de Groq (status no exitoso) o de red.
    El detalle se queda en los logs; al cliente solo le llega el mensaje genérico.
    """
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__()
        self.detail = detail
        self.upstream_status = status_code

    def __str__(self) -> str:
        if self.upstream_status is not None:
            return f"{self.detail} (status {self.upstream_status})"
        return self.detail
