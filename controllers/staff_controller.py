import io
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

import openpyxl
import pandas as pd
from openpyxl.drawing.image import Image as ExcelImage

from models.staff_model import (
    ALL_ROLES, ROLES, STATUSES, NewStaff, Record, StaffTable, StaffValidationError,
)
from services.api_service import APIServiceError, StaffAPIService
from services.credentials_service import CredentialsService
from services.table_service import TableService

logger = logging.getLogger(__name__)

# Número plano, con separador de miles opcional: 25000, 25,000, 1250.5
_SALARY_PATTERN = re.compile(r"^(\d+|\d{1,3}(,\d{3})+)(\.\d+)?$")


class StaffController:
    def __init__(self, api: StaffAPIService = None):
        self.api = api or StaffAPIService()
        self.table = StaffTable()
        self.filtered_staff: List[Record] = []
        self.selected_role = ALL_ROLES
        self.search_term = ""
        self.loaded = False
        self.last_warning: str | None = None

    @property
    def staff_list(self) -> List[Record]:
        return self.table.records

    # --- LECTURA ---
    def load_staff(self) -> List[Record]:
        raw = self.api.fetch_staff()
        self.table = TableService.to_table(raw)
        self.loaded = True
        logger.info(f"Personal cargado: {len(self.table.records)} registros")
        return self.apply_filters()

    # --- FILTROS ---
    def apply_filters(self) -> List[Record]:
        self.filtered_staff = TableService.filter_records(
            self.table.records, self.selected_role, self.search_term)
        return self.filtered_staff

    def set_role(self, role: str) -> List[Record]:
        self.selected_role = role or ALL_ROLES
        return self.apply_filters()

    def set_search(self, term: str) -> List[Record]:
        self.search_term = (term or "").lower()
        return self.apply_filters()

    # --- ALTA ---
    def add_staff(self, form: NewStaff) -> Tuple[str, str]:
        if not form.Username:
            form.Username = CredentialsService.suggest_username(form.Name, form.Staff_ID, form.Role)
        missing = form.missing_fields()
        if missing:
            raise StaffValidationError("Complete todos los campos obligatorios: " + ", ".join(missing))
        salary = self._parse_salary(form.Base_Salary)
        if form.Role not in ROLES:
            raise StaffValidationError(f"Rol inválido: {form.Role}")
        if form.Account_Status not in STATUSES:
            raise StaffValidationError(f"Estado inválido: {form.Account_Status}")

        payload = {
            "Staff_ID": form.Staff_ID,
            "Name": form.Name,
            "Role": form.Role,
            "Mobile": form.Mobile,
            "Assigned_Area_ID": form.Assigned_Area_ID,
            "Assigned_Area_Name": form.Assigned_Area_Name,
            "Base_Salary": salary,
            "Username": form.Username,
            "Password_Hash": CredentialsService.hash_password(form.Password),
            "Account_Status": form.Account_Status,
        }
        self.api.add_staff(payload)
        logger.info(f"Empleado agregado: {form.Staff_ID} ({form.Username})")
        return form.Username, form.Password

    @staticmethod
    def _parse_salary(value: str):
        value = str(value).strip()
        if not _SALARY_PATTERN.match(value):
            raise StaffValidationError(f"Salario base inválido: {value}")
        salary = float(value.replace(",", ""))
        return int(salary) if salary.is_integer() else salary

    # --- ESTADO / CONTRASEÑA / BAJA ---
    @staticmethod
    def _require_identity(staff_id: str, name: str) -> Tuple[str, str]:
        staff_id = (staff_id or "").strip()
        name = (name or "").strip()
        if not staff_id or not name:
            raise StaffValidationError("Ingrese el ID y el nombre del empleado")
        return staff_id, name

    def change_status(self, staff_id: str, name: str, status: str) -> None:
        staff_id, name = self._require_identity(staff_id, name)
        self.last_warning = None
        if status not in STATUSES:
            raise StaffValidationError(f"Estado inválido: {status}")
        self.api.change_status({"id": staff_id, "name": name, "status": status})
        logger.info(f"Estado de {staff_id} -> {status}")
        if self.loaded:
            self._reload_after_write()

    def reset_password(self, staff_id: str, name: str, new_password: str) -> None:
        staff_id, name = self._require_identity(staff_id, name)
        self.last_warning = None
        if not new_password:
            raise StaffValidationError("Ingrese la nueva contraseña")
        self.api.reset_password({
            "Staff_ID": staff_id,
            "Name": name,
            "Password_Hash": CredentialsService.hash_password(new_password),
            "New_Password": new_password,
        })
        logger.info(f"Contraseña restablecida para {staff_id}")
        if self.loaded:
            self._reload_after_write()

    def delete_staff(self, staff_id: str, name: str) -> None:
        staff_id, name = self._require_identity(staff_id, name)
        self.last_warning = None
        self.api.delete_staff({"id": staff_id, "name": name})
        logger.info(f"Empleado eliminado: {staff_id}")
        self._reload_after_write()

    def _reload_after_write(self) -> bool:
        """La escritura ya fue confirmada; si la recarga falla se conserva la lista anterior."""
        self.last_warning = None
        try:
            self.load_staff()
            return True
        except APIServiceError as e:
            logger.error(f"No se pudo recargar el personal: {e}")
            self.last_warning = f"La operación se realizó, pero no se pudo actualizar la lista: {e}"
            return False

    # --- RESUMEN ---
    def get_role_summary(self) -> Dict[str, int]:
        counts = {role: 0 for role in ROLES}
        for r in self.table.records:
            role = r.get("Role") or "Sin rol"
            counts[role] = counts.get(role, 0) + 1
        return counts

    def get_status_summary(self, include_empty: bool = True) -> Dict[str, int]:
        counts = {status: 0 for status in STATUSES}
        for r in self.table.records:
            status = r.get("Account_Status") or "Sin estado"
            counts[status] = counts.get(status, 0) + 1
        if not include_empty:
            counts = {k: v for k, v in counts.items() if v > 0}
        return counts

    # ========================================================
    #  EXPORTACIÓN A EXCEL
    # ========================================================
    def export_staff(self, filename: str, figure: Optional[Any] = None) -> None:
        if not self.filtered_staff:
            raise StaffValidationError("No hay personal para exportar")

        # 1. Personal visible, sin columnas de contraseña
        df_staff = pd.DataFrame(self.filtered_staff)
        cols = [c for c in self.table.columns if c in df_staff.columns]
        df_staff = df_staff[cols or list(df_staff.columns)]
        df_staff = df_staff[[c for c in df_staff.columns if "password" not in c.lower()]]

        # 2. Resumen por rol y estado
        roles = self.get_role_summary()
        df_roles = pd.DataFrame({"Rol": list(roles.keys()), "Cantidad": list(roles.values())})
        df_roles = pd.concat([df_roles, pd.DataFrame([{"Rol": "TOTAL", "Cantidad": len(self.table.records)}])],
                             ignore_index=True)
        statuses = self.get_status_summary()
        df_status = pd.DataFrame({"Estado": list(statuses.keys()), "Cantidad": list(statuses.values())})

        with pd.ExcelWriter(filename, engine="openpyxl") as writer:
            df_staff.to_excel(writer, sheet_name="Personal", index=False)
            df_roles.to_excel(writer, sheet_name="Resumen por Rol", index=False)
            df_status.to_excel(writer, sheet_name="Resumen por Rol", index=False, startcol=3)

            for sheet_name in writer.sheets:
                sheet = writer.sheets[sheet_name]
                for column in sheet.columns:
                    max_length = 0
                    column = [cell for cell in column]
                    for cell in column:
                        if cell.value is not None and len(str(cell.value)) > max_length:
                            max_length = len(str(cell.value))
                    sheet.column_dimensions[column[0].column_letter].width = max_length + 2

        if figure is not None:
            wb = openpyxl.load_workbook(filename)
            ws = wb["Resumen por Rol"]
            row_idx = len(df_roles) + 4
            buf = io.BytesIO()
            figure.savefig(buf, format="png", dpi=100, bbox_inches="tight")
            buf.seek(0)
            img = ExcelImage(buf)
            img.anchor = f"A{row_idx}"
            ws.add_image(img)
            wb.save(filename)
        logger.info(f"Personal exportado a {filename} ({len(df_staff)} filas)")
