
"""
items_shared.config
-------------------
Carga de configuración para servicios y clientes (variables de entorno y .env).
Synopsis: created by emeday 2025
"""
from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    # Identidad del servicio
    SERVICE_NAME: str = Field(default="items-service")
    APP_HOST: str = Field(default="0.0.0.0")
    APP_PORT: int = Field(default=3001)

    # URL base de la API (lado cliente)
    API_URL: str = Field(default="http://localhost:3001")

    # Observabilidad / HTTP
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: str = Field(default="*")
    DEBUG_ROUTES: bool = Field(default=True)

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    @property
    def cors_origins(self) -> List[str]:
        # "a,b , c" -> ["a", "b", "c"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

def load_settings(service_name: str|None=None) -> Settings:
    s = Settings()
    if service_name:
        s.SERVICE_NAME = service_name
    return s
