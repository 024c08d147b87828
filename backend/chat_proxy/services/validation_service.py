from __future__ import annotations

from typing import Any, Dict, List

from chat_proxy.domain.errors import InvalidContent, InvalidFormat, MessageTooLong

MAX_HISTORY_MESSAGES = 8
MAX_MESSAGE_CHARS = 500


def utf16_length(text: str) -> int:
    """
    Largo en unidades UTF-16 (como String.length en el navegador): un emoji
    fuera del BMP cuenta como 2.
    """
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def sanitize_messages(
    body: Any,
    *,
    max_history: int = MAX_HISTORY_MESSAGES,
    max_chars: int = MAX_MESSAGE_CHARS,
) -> List[Dict[str, Any]]:
    """
    Valida y limpia la lista `messages` del body.

    - Solo se conservan los últimos `max_history` mensajes (controla costo de tokens).
    - El contenido se recorta con strip() y se limita a `max_chars` unidades UTF-16.
    - El primer error corta la validación.
    - El role pasa sin revisar.
    """
    messages = body.get("messages") if isinstance(body, dict) else None

    if not messages or not isinstance(messages, list):
        raise InvalidFormat()

    limited = messages[-max_history:]
    sanitized: List[Dict[str, Any]] = []

    for msg in limited:
        content = msg.get("content") if isinstance(msg, dict) else None

        if not content or not isinstance(content, str):
            raise InvalidContent()

        content = content.strip()

        if utf16_length(content) > max_chars:
            raise MessageTooLong(max_chars)

        sanitized.append({**msg, "content": content})

    return sanitized
