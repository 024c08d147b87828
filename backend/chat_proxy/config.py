import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Cargar .env una sola vez en el arranque de la app
load_dotenv()


GROQ_CHAT_COMPLETIONS_URL = "https://api.groq.com/openai/v1/chat/completions"


@dataclass(frozen=True)
class Settings:
    # Server
    PORT: int = 10000
    ENV: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    # Provider
    GROQ_API_KEY: str = ""
    GROQ_API_URL: str = GROQ_CHAT_COMPLETIONS_URL
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    GROQ_TEMPERATURE: float = 0.7
    GROQ_MAX_TOKENS: int = 512
    UPSTREAM_TIMEOUT_SECONDS: float = 30.0

    # Rate limiting (ventana fija por identidad)
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    CHAT_RATE_LIMIT: str = "10 per minute"

    # Validación de entrada
    MAX_HISTORY_MESSAGES: int = 8
    MAX_MESSAGE_CHARS: int = 500

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Lee la configuración del entorno en el momento de la llamada.
        """
        return cls(
            PORT=int(os.getenv("PORT", "10000")),
            ENV=os.getenv("ENV", "production"),
            DEBUG=os.getenv("DEBUG", "false").lower() == "true",
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            CORS_ORIGINS=os.getenv("CORS_ORIGINS", "*"),
            GROQ_API_KEY=os.getenv("GROQ_API_KEY", ""),
            GROQ_API_URL=os.getenv("GROQ_API_URL", GROQ_CHAT_COMPLETIONS_URL),
            GROQ_MODEL=os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile"),
            GROQ_TEMPERATURE=float(os.getenv("GROQ_TEMPERATURE", "0.7")),
            GROQ_MAX_TOKENS=int(os.getenv("GROQ_MAX_TOKENS", "512")),
            UPSTREAM_TIMEOUT_SECONDS=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30")),
            RATE_LIMIT_STORAGE_URI=os.getenv("RATE_LIMIT_STORAGE_URI", "memory://"),
            CHAT_RATE_LIMIT=os.getenv("CHAT_RATE_LIMIT", "10 per minute"),
            MAX_HISTORY_MESSAGES=int(os.getenv("MAX_HISTORY_MESSAGES", "8")),
            MAX_MESSAGE_CHARS=int(os.getenv("MAX_MESSAGE_CHARS", "500")),
        )


settings = Settings.from_env()
