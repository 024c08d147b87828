import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 30


class HttpClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class HttpResponseDecodeError(HttpClientError):
    """
    Respuesta 2xx cuyo cuerpo no es JSON (o viene vacío).
    """


def post_json(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT
) -> Any:
    """
    POST con JSON y respuesta JSON. Un solo intento, sin reintentos.

    Lanza:
      - HttpClientError sin status_code si falla la red (timeout, DNS, conexión)
      - HttpClientError con status_code y payload si la respuesta no es 2xx
      - HttpResponseDecodeError si la respuesta es 2xx pero no trae JSON
    """
    try:
        resp = requests.post(url, headers=headers, json=json_body, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"HTTP POST error: {e}")
        raise HttpClientError(str(e))

    payload = _decode_json(resp)

    if not resp.ok:
        raise HttpClientError(
            f"POST {url} -> {resp.status_code}",
            status_code=resp.status_code,
            payload=payload
        )

    if payload is None:
        raise HttpResponseDecodeError(
            f"POST {url} -> {resp.status_code} sin cuerpo JSON",
            status_code=resp.status_code
        )

    return payload


def _decode_json(resp: requests.Response) -> Optional[Any]:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None
