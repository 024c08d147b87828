import logging
from typing import Any, Dict, List, Optional

from chat_proxy.clients.http_client import HttpClientError, HttpResponseDecodeError, post_json
from chat_proxy.config import Settings, settings as default_settings
from chat_proxy.domain.chat import (
    CompletionFailure,
    CompletionResult,
    parse_completion_envelope,
    parse_error_envelope,
)

logger = logging.getLogger(__name__)


class GroqClient:
    """
    Cliente HTTP directo al endpoint OpenAI-compatible de Groq.
    Modelo, temperature y max_tokens son fijos por instancia.
    """

    def __init__(
        self,
        api_key: str,
        *,
        url: str,
        model: str,
        temperature: float,
        max_tokens: int,
        timeout_seconds: float,
    ):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds

    def build_payload(self, messages: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def complete(self, messages: List[Dict[str, Any]]) -> CompletionResult:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        try:
            result = post_json(
                self.url,
                headers=headers,
                json_body=self.build_payload(messages),
                timeout=self.timeout_seconds,
            )
        except HttpResponseDecodeError as e:
            return CompletionFailure(message=str(e), status_code=e.status_code)
        except HttpClientError as e:
            if e.status_code is None:
                # Falla de red: se trata igual que un error de Groq
                return CompletionFailure(message=str(e))
            return parse_error_envelope(e.payload, status_code=e.status_code)

        return parse_completion_envelope(result)


def build_groq_client(settings: Optional[Settings] = None) -> Optional[GroqClient]:
    """
    Inicializa el cliente de Groq.
    Retorna None si no hay GROQ_API_KEY (error de configuración del servidor).
    """
    settings = settings or default_settings

    if not settings.GROQ_API_KEY:
        logger.error("GROQ_API_KEY no configurada")
        return None

    client = GroqClient(
        settings.GROQ_API_KEY,
        url=settings.GROQ_API_URL,
        model=settings.GROQ_MODEL,
        temperature=settings.GROQ_TEMPERATURE,
        max_tokens=settings.GROQ_MAX_TOKENS,
        timeout_seconds=settings.UPSTREAM_TIMEOUT_SECONDS,
    )
    logger.info(f"Cliente Groq inicializado correctamente (modelo={settings.GROQ_MODEL})")
    return client
