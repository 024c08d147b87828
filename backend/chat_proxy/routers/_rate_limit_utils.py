from __future__ import annotations

from typing import Any, Callable

from flask import current_app

from chat_proxy.extensions import limiter


def chat_rate_limit() -> str:
    """
    Regla del endpoint de chat (p.ej. "10 per minute"), leída de los
    settings de la app activa.
    """
    return current_app.extensions["chat_proxy"].settings.CHAT_RATE_LIMIT


def limit(rule: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Aplica limiter.limit(rule). `rule` puede ser un string o un callable
    que regrese el string en tiempo de request.
    """
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        return limiter.limit(rule)(fn)
    return decorator


def exempt(fn: Callable[..., Any]) -> Callable[..., Any]:
    return limiter.exempt(fn)
