from flask import request


def get_client_identity() -> str:
    """
    Identidad para rate limit: X-Forwarded-For tal cual llega (sin parsear
    la cadena de proxies), o la IP del socket si no viene el header.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded
    return request.remote_addr or "unknown"
