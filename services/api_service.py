"""
Cliente HTTP del personal.

Lectura: API de hojas (GET /api/read/<hoja>).
Escritura: webhooks JSON (add-staff, change-status, reset-password, delete).
"""
import logging
from typing import Any, Dict, Optional

import requests

from config import config
from models.staff_model import StaffError

logger = logging.getLogger(__name__)


class APIServiceError(StaffError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StaffAPIService:
    def __init__(self, sheets_url: str = None, webhook_url: str = None,
                 timeout: float = None, session: requests.Session = None):
        self.sheets_url = (sheets_url or config.SHEETS_API_URL).rstrip("/")
        self.webhook_url = (webhook_url or config.WEBHOOK_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    # --- LECTURA ---
    def fetch_staff(self, sheet: str = None) -> Dict[str, Any]:
        url = f"{self.sheets_url}/api/read/{sheet or config.STAFF_SHEET}"
        logger.info(f"Leyendo personal desde {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error de conexión leyendo personal: {e}")
            raise APIServiceError(f"Error de conexión: {e}")

        if not response.ok:
            logger.error(f"Lectura de personal falló: {response.status_code}")
            raise APIServiceError(f"No se pudo obtener el personal: {response.status_code}",
                                  status_code=response.status_code)
        try:
            data = response.json()
        except ValueError:
            raise APIServiceError("Formato de datos inválido")

        if not isinstance(data, dict) or not data.get("success") or not isinstance(data.get("data"), list):
            raise APIServiceError("Formato de datos inválido")
        return data

    # --- ESCRITURA ---
    def _post(self, path: str, payload: Dict[str, Any], action: str) -> None:
        url = f"{self.webhook_url}/{path.lstrip('/')}"
        logger.info(f"{action}: POST {url}")
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{action}: error de conexión: {e}")
            raise APIServiceError(f"Error de conexión: {e}")
        if not response.ok:
            logger.error(f"{action}: el servidor respondió {response.status_code}")
            raise APIServiceError(f"Error del servidor: {response.status_code}",
                                  status_code=response.status_code)

    def add_staff(self, payload: Dict[str, Any]) -> None:
        self._post(config.ADD_STAFF_PATH, payload, "Alta de personal")

    def change_status(self, payload: Dict[str, Any]) -> None:
        self._post(config.CHANGE_STATUS_PATH, payload, "Cambio de estado")

    def reset_password(self, payload: Dict[str, Any]) -> None:
        self._post(config.RESET_PASSWORD_PATH, payload, "Restablecer contraseña")

    def delete_staff(self, payload: Dict[str, Any]) -> None:
        self._post(config.DELETE_STAFF_PATH, payload, "Baja de personal")
