import secrets
import string

import bcrypt

from config import config

PASSWORD_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits


class CredentialsService:

    @staticmethod
    def hash_password(plain: str, rounds: int = None) -> str:
        salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
        return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def check_password(plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Hash con formato inválido (p.ej. contraseñas antiguas en texto plano)
            return False

    @staticmethod
    def suggest_username(name: str, staff_id: str, role: str) -> str:
        """nombre.rol + sufijo del ID. Ej: ('John Doe', 'BK-101', 'Booker') -> 'john.booker101'"""
        name = (name or "").strip()
        staff_id = (staff_id or "").strip()
        if not name or not staff_id:
            return ""
        first_name = name.split()[0].lower()
        parts = staff_id.split("-")
        id_number = parts[1] if len(parts) > 1 and parts[1] else "001"
        return f"{first_name}.{(role or '').lower()}{id_number}"

    @staticmethod
    def generate_password(length: int = 8) -> str:
        return "".join(secrets.choice(PASSWORD_CHARS) for _ in range(length))
