from flask import Blueprint

from chat_proxy.controllers.chat_controller import chat_controller
from chat_proxy.routers._rate_limit_utils import chat_rate_limit, limit

chat_bp = Blueprint("chat", __name__)

limited_chat_controller = limit(chat_rate_limit)(chat_controller)

chat_bp.route("/api/chat", methods=["POST"])(limited_chat_controller)
chat_bp.add_url_rule("/chat", endpoint="chat_alias", view_func=limited_chat_controller, methods=["POST"])
