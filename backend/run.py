from chat_proxy import create_app
from chat_proxy.config import settings

app = create_app(settings)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.DEBUG)
