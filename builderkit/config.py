import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv
from builderkit.domain.errors import ConfigError


### COMMENTS
# ==========================================================
# Konfiguracja (config.py) — zmienne środowiskowe + .env.
# ==========================================================
# - `load_dotenv()` wczytuje plik .env (jeśli jest) do os.environ.
# - Zmienne: BUILDERKIT_HOST, BUILDERKIT_PORT, BUILDERKIT_LOG_LEVEL.
# - Domyślny port 8080 — jak domyślny port aplikacji Spring Boot.
# - Błędny port lub poziom logowania → ConfigError (CLI pokazuje czerwony panel).

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Czyta ustawienia ze środowiska.

    :raises ConfigError: Gdy BUILDERKIT_PORT nie jest liczbą całkowitą
        albo BUILDERKIT_LOG_LEVEL nie jest nazwą poziomu logowania.
    """
    load_dotenv()
    defaults = Settings()
    raw_port = os.environ.get("BUILDERKIT_PORT", str(defaults.port))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError("BUILDERKIT_PORT", f"oczekiwano liczby, dostano {raw_port!r}")
    log_level = os.environ.get("BUILDERKIT_LOG_LEVEL", defaults.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError("BUILDERKIT_LOG_LEVEL", f"nieznany poziom logowania {log_level!r}")
    return Settings(
        host=os.environ.get("BUILDERKIT_HOST", defaults.host),
        port=port,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
