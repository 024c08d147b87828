from flask import Blueprint

from chat_proxy.controllers.system_controller import health_controller
from chat_proxy.routers._rate_limit_utils import exempt

system_bp = Blueprint("system", __name__)

system_bp.route("/health", methods=["GET"])(exempt(health_controller))
