"""
➡️ But : Réglages du serveur todo et de son client Python.

Lus par pydantic-settings depuis l'environnement ou un fichier .env
(noms sensibles à la casse : PORT, LOG_LEVEL, API_URL...).

Valeurs dérivées si absentes :
- LOG_LEVEL : DEBUG en dev, INFO sinon ;
- API_URL : reconstruite depuis HOST et PORT, pour que le client vise
  le serveur lancé avec les mêmes réglages.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-API"
    APP_VERSION: str = "0.1.0"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur HTTP
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: Optional[str] = None  # auto selon ENV si None

    # -----------------------------
    # Client
    # -----------------------------
    API_URL: Optional[str] = None  # auto depuis HOST/PORT si None
    CLIENT_TIMEOUT: float = 5.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        if self.LOG_LEVEL is None:
            object.__setattr__(self, "LOG_LEVEL", "DEBUG" if self.ENV == "dev" else "INFO")

        if not self.API_URL:
            host = "localhost" if self.HOST in ("0.0.0.0", "127.0.0.1") else self.HOST
            object.__setattr__(self, "API_URL", f"http://{host}:{self.PORT}")


# Instance globale importable partout
settings = Settings()
