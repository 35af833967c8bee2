"""
Configuración de la aplicación.

Todo se lee de variables de entorno (archivo .env opcional).
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # ===== API de lectura (hoja de cálculo) =====
    SHEETS_API_URL: str = os.getenv(
        "SHEETS_API_URL",
        "https://sheets-api-545260361851.us-central1.run.app"
    ).rstrip("/")
    STAFF_SHEET: str = os.getenv("STAFF_SHEET", "Staff_Master")

    # ===== Webhooks de escritura =====
    WEBHOOK_BASE_URL: str = os.getenv(
        "WEBHOOK_BASE_URL",
        "https://n8n.edutechpulse.online/webhook"
    ).rstrip("/")
    ADD_STAFF_PATH: str = os.getenv("ADD_STAFF_PATH", "add-staff")
    CHANGE_STATUS_PATH: str = os.getenv("CHANGE_STATUS_PATH", "change-status")
    RESET_PASSWORD_PATH: str = os.getenv("RESET_PASSWORD_PATH", "reset-password")
    # El webhook desplegado se llama así
    DELETE_STAFF_PATH: str = os.getenv("DELETE_STAFF_PATH", "delet-staff")

    # ===== Red / seguridad =====
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()
