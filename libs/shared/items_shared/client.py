
"""
items_shared.client
-------------------
Cliente HTTP (httpx) para la API de items.
- URL base desde API_URL (Settings) o explícita
- Cualquier respuesta no-2xx o fallo de red -> ItemsApiError (sin reintentos)
Synopsis: created by emeday 2025
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import httpx
from pydantic import BaseModel

from .config import load_settings


class ApiItem(BaseModel):
    id: int
    name: str
    description: str = ""


class ItemsApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ItemsApiClient:
    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None,
                 timeout: float = 10.0):
        self.base_url = (base_url or load_settings().API_URL).rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=self.base_url, timeout=timeout)

    def __enter__(self) -> "ItemsApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        # Un cliente inyectado lo cierra quien lo creó
        if self._owns_http:
            self._http.close()

    def _get(self, path: str) -> Any:
        try:
            response = self._http.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ItemsApiError(
                f"GET {path} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ItemsApiError(f"GET {path} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise ItemsApiError(f"GET {path} returned a non-JSON body",
                                status_code=response.status_code) from exc

    def _get_model(self, path: str, many: bool = False) -> Any:
        data = self._get(path)
        try:
            if many:
                return [ApiItem.model_validate(i) for i in data]
            return ApiItem.model_validate(data)
        except (ValueError, TypeError) as exc:
            # pydantic.ValidationError es subclase de ValueError
            raise ItemsApiError(f"GET {path} returned an unexpected body") from exc

    def root(self) -> Dict[str, Any]:
        return self._get("/")

    def health(self) -> Dict[str, Any]:
        return self._get("/health")

    def list_items(self) -> List[ApiItem]:
        return self._get_model("/api/items", many=True)

    def get_item(self, item_id: Any) -> ApiItem:
        # El id viaja como un único segmento de ruta
        return self._get_model(f"/api/items/{quote(str(item_id), safe='')}")
