import logging

from flask import current_app, jsonify, request

from chat_proxy.domain.errors import ServerMisconfigured, UpstreamFailure
from chat_proxy.services.groq_service import run_chat_completion
from chat_proxy.services.validation_service import sanitize_messages

logger = logging.getLogger(__name__)


def chat_controller():
    """
    Controller del endpoint /api/chat.
    El router ya filtró el método (405) y el limiter ya contó el request (429).
    Orden: API key -> validación -> Groq.
    Cualquier etapa puede cortar con un ChatProxyError.
    """
    proxy = current_app.extensions["chat_proxy"]

    groq_client = proxy.groq_client
    if groq_client is None:
        logger.error("Request rechazado: GROQ_API_KEY no configurada")
        raise ServerMisconfigured()

    # =====================================================
    # INPUT VALIDATION
    # =====================================================
    data = request.get_json(force=True, silent=True)
    messages = sanitize_messages(
        data,
        max_history=proxy.settings.MAX_HISTORY_MESSAGES,
        max_chars=proxy.settings.MAX_MESSAGE_CHARS,
    )

    # =====================================================
    # GROQ
    # =====================================================
    try:
        reply = run_chat_completion(messages=messages, groq_client=groq_client)
    except UpstreamFailure as e:
        logger.error(f"Groq API Error: {e}")
        raise

    return jsonify({"reply": reply}), 200
