from flask import current_app, jsonify


def health_controller():
    proxy = current_app.extensions["chat_proxy"]

    return jsonify({
        "status": "healthy",
        "service": "chat-proxy",
        "ai_ready": proxy.groq_client is not None
    })
