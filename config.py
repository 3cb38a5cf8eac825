"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks STACK_CALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Skaner: False = nieznane znaki są pomijane, True = błąd unexpected_character
    strict_scanner: bool = False

    # Teksty wyświetlacza kalkulatora
    placeholder_text: str = "0"
    error_message: str = "Error"

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "StackCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="STACK_CALC_", env_file=".env", extra="ignore")
