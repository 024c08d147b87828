from flask_cors import CORS
from flask_limiter import Limiter

from chat_proxy.controllers._request_utils import get_client_identity


# Extensión CORS
# Se inicializa con init_app(app) desde create_app()
cors = CORS()


# Extensión Rate Limiter
# Ventana fija: arranca con el primer hit y deja pasar exactamente N requests.
# El storage (memory://, redis://...) sale de RATELIMIT_STORAGE_URI en create_app().
limiter = Limiter(
    key_func=get_client_identity,
    default_limits=[],
    strategy="fixed-window",
)
