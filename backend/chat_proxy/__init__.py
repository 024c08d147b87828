import logging
import sys
from dataclasses import dataclass
from typing import Optional

from flask import Flask

from chat_proxy.clients.groq_client import GroqClient, build_groq_client
from chat_proxy.config import Settings
from chat_proxy.extensions import cors, limiter
from chat_proxy.routers.chat_routes import chat_bp
from chat_proxy.routers.error_handlers import register_error_handlers
from chat_proxy.routers.system_routes import system_bp

_UNSET = object()


@dataclass
class ChatProxyState:
    settings: Settings
    groq_client: Optional[GroqClient]


def create_app(settings: Optional[Settings] = None, groq_client=_UNSET):
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    app = Flask(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.config["RATELIMIT_STORAGE_URI"] = settings.RATE_LIMIT_STORAGE_URI

    cors.init_app(app, resources={r"/*": {"origins": settings.CORS_ORIGINS}})
    limiter.init_app(app)

    if groq_client is _UNSET:
        groq_client = build_groq_client(settings)

    app.extensions["chat_proxy"] = ChatProxyState(
        settings=settings,
        groq_client=groq_client,
    )

    # Blueprints
    app.register_blueprint(system_bp)
    app.register_blueprint(chat_bp)
    # Error handlers centralizados
    register_error_handlers(app)

    return app
