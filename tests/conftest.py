"""Fixtures compartidos para los tests del gestor de personal."""

from unittest.mock import MagicMock

import pytest

from config import config
from services.api_service import StaffAPIService


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Costo bcrypt mínimo para que los tests no sean lentos."""
    monkeypatch.setattr(config, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def raw_staff():
    """Respuesta típica de /api/read/Staff_Master."""
    return {
        "success": True,
        "data": [
            ["Staff ID", "Name", "Role", "Mobile", "Assigned Area Name",
             "Base Salary", "Username", "Password_Hash", "Account Status"],
            ["BK-101", "John Smith", "Booker", "03001234567", "North", "25000",
             "john.booker101", "$2b$10$abc", "Active"],
            ["MG-201", "Sara Khan", "Manager", "03111234567", "Central", "60000",
             "sara.manager201", "$2b$10$def", "Active"],
            ["RD-301", "Ali Raza", "Rider", "03211234567", "South", "18000",
             "ali.rider301", "$2b$10$ghi", "Inactive"],
            ["RD-302", "Johnny Doe", "Rider", "03331234567"],
        ],
    }


@pytest.fixture
def mock_api(raw_staff):
    api = MagicMock(spec=StaffAPIService)
    api.fetch_staff.return_value = raw_staff
    return api
