from __future__ import annotations

import logging
from typing import Any, Dict, List

from chat_proxy.clients.groq_client import GroqClient
from chat_proxy.domain.chat import CompletionFailure
from chat_proxy.domain.errors import UpstreamFailure

logger = logging.getLogger(__name__)


def run_chat_completion(
    *,
    messages: List[Dict[str, Any]],
    groq_client: GroqClient
) -> str:
    """
    Ejecuta la completion en Groq y retorna el texto final.
    Cualquier falla (status no exitoso o red) se convierte en UpstreamFailure.
    """
    logger.info(f"Llamando a Groq: model={groq_client.model} messages={len(messages)}")

    result = groq_client.complete(messages)

    if isinstance(result, CompletionFailure):
        raise UpstreamFailure(result.message, status_code=result.status_code)

    return result.text
