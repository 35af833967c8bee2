"""
Tests del controlador de personal: carga, filtros, operaciones y exportación.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import openpyxl
import pytest

from controllers.staff_controller import StaffController
from models.staff_model import NewStaff, StaffValidationError
from services.api_service import APIServiceError
from services.credentials_service import CredentialsService


@pytest.fixture
def controller(mock_api):
    return StaffController(api=mock_api)


@pytest.fixture
def loaded(controller):
    controller.load_staff()
    return controller


def _form(**overrides):
    data = dict(Staff_ID="BK-150", Name="Maria Lopez", Role="Booker", Mobile="03009998877",
                Base_Salary="30000", Password="clave123")
    data.update(overrides)
    return NewStaff(**data)


class TestLoadAndFilter:

    def test_load_populates_lists(self, loaded):
        assert len(loaded.staff_list) == 4
        assert loaded.filtered_staff == loaded.staff_list
        assert loaded.loaded

    def test_empty_sheet_loads_empty_roster(self, controller, mock_api):
        mock_api.fetch_staff.return_value = {"success": True, "data": []}

        assert controller.load_staff() == []
        assert controller.staff_list == []
        assert controller.loaded

    def test_load_error_propagates(self, controller, mock_api):
        mock_api.fetch_staff.side_effect = APIServiceError("No se pudo obtener el personal: 503")

        with pytest.raises(APIServiceError):
            controller.load_staff()
        assert not controller.loaded

    def test_role_then_search_combine(self, loaded):
        loaded.set_role("Rider")
        result = loaded.set_search("Ali")

        assert [r["Staff_ID"] for r in result] == ["RD-301"]

    def test_changing_role_reapplies_search_on_full_list(self, loaded):
        loaded.set_search("john")
        loaded.set_role("Rider")
        assert [r["Staff_ID"] for r in loaded.filtered_staff] == ["RD-302"]

        loaded.set_role("All")
        assert [r["Staff_ID"] for r in loaded.filtered_staff] == ["BK-101", "RD-302"]

    def test_clearing_search_restores_role_view(self, loaded):
        loaded.set_role("Rider")
        loaded.set_search("zzz")
        assert loaded.filtered_staff == []

        assert len(loaded.set_search("")) == 2

    def test_reload_keeps_filters(self, loaded):
        loaded.set_role("Manager")
        loaded.load_staff()

        assert [r["Staff_ID"] for r in loaded.filtered_staff] == ["MG-201"]


class TestAddStaff:

    def test_posts_hashed_payload(self, controller, mock_api):
        username, password = controller.add_staff(_form())

        payload = mock_api.add_staff.call_args[0][0]
        assert username == "maria.booker150"
        assert password == "clave123"
        assert payload["Username"] == "maria.booker150"
        assert payload["Base_Salary"] == 30000
        assert payload["Account_Status"] == "Active"
        assert "Password" not in payload
        assert CredentialsService.check_password("clave123", payload["Password_Hash"])

    def test_explicit_username_kept(self, controller, mock_api):
        controller.add_staff(_form(Username="mlopez"))

        assert mock_api.add_staff.call_args[0][0]["Username"] == "mlopez"

    def test_thousands_separator_salary(self, controller, mock_api):
        controller.add_staff(_form(Base_Salary="25,000"))

        assert mock_api.add_staff.call_args[0][0]["Base_Salary"] == 25000

    def test_decimal_salary(self, controller, mock_api):
        controller.add_staff(_form(Base_Salary="1,250.5"))

        assert mock_api.add_staff.call_args[0][0]["Base_Salary"] == 1250.5

    def test_missing_fields_rejected(self, controller, mock_api):
        with pytest.raises(StaffValidationError, match="Mobile"):
            controller.add_staff(_form(Mobile=""))
        mock_api.add_staff.assert_not_called()

    @pytest.mark.parametrize("salary", ["abc", "-5", "nan", "inf", "1_000", "1,2,3", "25,00", "1e3"])
    def test_invalid_salary_rejected(self, controller, mock_api, salary):
        with pytest.raises(StaffValidationError, match="Salario"):
            controller.add_staff(_form(Base_Salary=salary))
        mock_api.add_staff.assert_not_called()

    def test_unknown_role_rejected(self, controller):
        with pytest.raises(StaffValidationError, match="Rol"):
            controller.add_staff(_form(Role="Chef"))


class TestStatusPasswordDelete:

    def test_change_status_payload(self, controller, mock_api):
        controller.change_status(" BK-101 ", "John Smith", "Inactive")

        mock_api.change_status.assert_called_once_with(
            {"id": "BK-101", "name": "John Smith", "status": "Inactive"})

    def test_change_status_reloads_only_when_loaded(self, controller, mock_api):
        controller.change_status("BK-101", "John Smith", "Inactive")
        mock_api.fetch_staff.assert_not_called()

        controller.load_staff()
        controller.change_status("BK-101", "John Smith", "Active")
        assert mock_api.fetch_staff.call_count == 2

    def test_change_status_requires_identity(self, controller, mock_api):
        with pytest.raises(StaffValidationError):
            controller.change_status("", "John", "Active")
        mock_api.change_status.assert_not_called()

    def test_change_status_rejects_unknown_status(self, controller):
        with pytest.raises(StaffValidationError):
            controller.change_status("BK-101", "John", "Suspended")

    def test_reset_password_payload(self, controller, mock_api):
        controller.reset_password("BK-101", "John Smith", "nueva123")

        payload = mock_api.reset_password.call_args[0][0]
        assert payload["Staff_ID"] == "BK-101"
        assert payload["Name"] == "John Smith"
        assert payload["New_Password"] == "nueva123"
        assert CredentialsService.check_password("nueva123", payload["Password_Hash"])

    def test_reset_password_requires_all_fields(self, controller, mock_api):
        with pytest.raises(StaffValidationError):
            controller.reset_password("BK-101", "John Smith", "")
        mock_api.reset_password.assert_not_called()

    def test_delete_always_reloads(self, controller, mock_api):
        controller.delete_staff("RD-302", "Johnny Doe")

        mock_api.delete_staff.assert_called_once_with({"id": "RD-302", "name": "Johnny Doe"})
        mock_api.fetch_staff.assert_called_once()
        assert controller.loaded

    def test_delete_succeeds_when_reload_fails(self, loaded, mock_api):
        before = list(loaded.staff_list)
        mock_api.fetch_staff.side_effect = APIServiceError("No se pudo obtener el personal: 503")

        loaded.delete_staff("RD-302", "Johnny Doe")

        mock_api.delete_staff.assert_called_once_with({"id": "RD-302", "name": "Johnny Doe"})
        assert loaded.staff_list == before
        assert "503" in loaded.last_warning

    def test_reset_password_succeeds_when_reload_fails(self, loaded, mock_api):
        mock_api.fetch_staff.side_effect = APIServiceError("Error de conexión: down")

        loaded.reset_password("BK-101", "John Smith", "nueva123")

        mock_api.reset_password.assert_called_once()
        assert loaded.last_warning is not None

    def test_successful_write_clears_previous_warning(self, loaded, mock_api, raw_staff):
        mock_api.fetch_staff.side_effect = APIServiceError("Error de conexión: down")
        loaded.change_status("BK-101", "John Smith", "Inactive")
        assert loaded.last_warning is not None

        mock_api.fetch_staff.side_effect = None
        mock_api.fetch_staff.return_value = raw_staff
        loaded.change_status("BK-101", "John Smith", "Active")

        assert loaded.last_warning is None

    def test_failed_delete_does_not_reload(self, controller, mock_api):
        mock_api.delete_staff.side_effect = APIServiceError("Error del servidor: 500", status_code=500)

        with pytest.raises(APIServiceError):
            controller.delete_staff("RD-302", "Johnny Doe")
        mock_api.fetch_staff.assert_not_called()


class TestSummary:

    def test_role_summary(self, loaded):
        assert loaded.get_role_summary() == {"Booker": 1, "Manager": 1, "Rider": 2, "Other": 0}

    def test_status_summary_counts_missing(self, loaded):
        assert loaded.get_status_summary() == {"Active": 2, "Inactive": 1, "Sin estado": 1}

    def test_status_summary_can_drop_empty_statuses(self, controller, mock_api):
        mock_api.fetch_staff.return_value = {"success": True, "data": [["Account Status"], ["Active"], ["Active"]]}
        controller.load_staff()

        assert controller.get_status_summary() == {"Active": 2, "Inactive": 0}
        assert controller.get_status_summary(include_empty=False) == {"Active": 2}


class TestExport:

    def test_export_requires_rows(self, controller, tmp_path):
        with pytest.raises(StaffValidationError):
            controller.export_staff(str(tmp_path / "vacio.xlsx"))

    def test_export_visible_staff_without_passwords(self, loaded, tmp_path):
        path = tmp_path / "personal.xlsx"
        loaded.set_role("Rider")

        loaded.export_staff(str(path))

        wb = openpyxl.load_workbook(path)
        assert wb.sheetnames == ["Personal", "Resumen por Rol"]
        rows = list(wb["Personal"].values)
        assert "Password_Hash" not in rows[0]
        assert rows[0][0] == "Staff_ID"
        assert [r[0] for r in rows[1:]] == ["RD-301", "RD-302"]
        summary = list(wb["Resumen por Rol"].values)
        assert ("TOTAL", 4) == summary[5][:2]

    def test_export_embeds_figure(self, loaded, tmp_path):
        path = tmp_path / "personal.xlsx"
        fig, ax = plt.subplots()
        ax.bar([0, 1], [1, 2])

        loaded.export_staff(str(path), figure=fig)
        plt.close(fig)

        wb = openpyxl.load_workbook(path)
        assert len(wb["Resumen por Rol"]._images) == 1
