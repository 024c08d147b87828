from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class CompletionReply:
    text: str


@dataclass(frozen=True)
class CompletionFailure:
    message: str
    status_code: Optional[int] = None


CompletionResult = Union[CompletionReply, CompletionFailure]

GENERIC_UPSTREAM_ERROR = "Groq API failed"


def parse_completion_envelope(payload: Any) -> CompletionReply:
    """
    Extrae choices[0].message.content.
    Si la estructura no viene completa regresa texto vacío en lugar de fallar.
    """
    text = ""
    if isinstance(payload, dict):
        choices = payload.get("choices")
        if isinstance(choices, list) and choices:
            first = choices[0]
            message = first.get("message") if isinstance(first, dict) else None
            if isinstance(message, dict):
                text = message.get("content") or ""
    return CompletionReply(text=text if isinstance(text, str) else str(text))


def parse_error_envelope(payload: Any, status_code: Optional[int] = None) -> CompletionFailure:
    """
    Toma error.message del cuerpo de Groq si existe, si no un mensaje genérico.
    """
    message: Optional[str] = None
    if isinstance(payload, dict):
        error: Dict[str, Any] = payload.get("error") if isinstance(payload.get("error"), dict) else {}
        message = error.get("message") or None
    return CompletionFailure(
        message=message if isinstance(message, str) else GENERIC_UPSTREAM_ERROR,
        status_code=status_code,
    )
