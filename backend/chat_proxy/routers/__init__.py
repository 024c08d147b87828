from .chat_routes import chat_bp
from .system_routes import system_bp

__all__ = [
    "chat_bp",
    "system_bp",
]
