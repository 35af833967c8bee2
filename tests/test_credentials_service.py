"""
Tests de credenciales: hash bcrypt, usuario sugerido y contraseñas aleatorias.
"""

from services.credentials_service import PASSWORD_CHARS, CredentialsService


class TestHashPassword:

    def test_hash_is_bcrypt(self):
        hashed = CredentialsService.hash_password("secreto123")

        assert hashed.startswith("$2b$")
        assert hashed != "secreto123"

    def test_hash_verifies(self):
        hashed = CredentialsService.hash_password("secreto123")

        assert CredentialsService.check_password("secreto123", hashed)
        assert not CredentialsService.check_password("otra", hashed)

    def test_salted(self):
        assert CredentialsService.hash_password("x") != CredentialsService.hash_password("x")

    def test_rounds_respected(self):
        hashed = CredentialsService.hash_password("x", rounds=5)

        assert hashed.startswith("$2b$05$")

    def test_plain_text_legacy_password_does_not_verify(self):
        assert CredentialsService.check_password("secreto", "secreto") is False


class TestSuggestUsername:

    def test_first_name_role_and_id_suffix(self):
        assert CredentialsService.suggest_username("John Smith", "BK-101", "Booker") == "john.booker101"

    def test_missing_suffix_defaults_to_001(self):
        assert CredentialsService.suggest_username("Sara", "MG", "Manager") == "sara.manager001"

    def test_empty_suffix_defaults_to_001(self):
        assert CredentialsService.suggest_username("Sara", "MG-", "Manager") == "sara.manager001"

    def test_requires_name_and_id(self):
        assert CredentialsService.suggest_username("", "BK-101", "Booker") == ""
        assert CredentialsService.suggest_username("John", "", "Booker") == ""


class TestGeneratePassword:

    def test_default_length(self):
        assert len(CredentialsService.generate_password()) == 8

    def test_alphanumeric_only(self):
        password = CredentialsService.generate_password(64)

        assert len(password) == 64
        assert all(c in PASSWORD_CHARS for c in password)
