from typing import Dict, List

ROLES = ["Booker", "Manager", "Rider", "Other"]
ALL_ROLES = "All"
STATUSES = ["Active", "Inactive"]

# Campos sobre los que opera la búsqueda libre
SEARCH_FIELDS = ["Name", "Staff_ID", "Mobile", "Username"]

Record = Dict[str, str]


class StaffError(Exception):
    pass


class StaffValidationError(StaffError):
    pass


class StaffTable:
    """
    Personal en memoria:
      - columns: encabezados normalizados, en orden
      - records: lista de dicts (un registro por fila de la hoja)
    """
    def __init__(self, columns=None, records=None):
        self.columns: List[str] = columns or []
        self.records: List[Record] = records or []


class NewStaff:
    """Datos del formulario de alta. Todo llega como texto desde la UI."""

    FIELDS = [
        "Staff_ID", "Name", "Role", "Mobile", "Assigned_Area_ID",
        "Assigned_Area_Name", "Base_Salary", "Username", "Password", "Account_Status",
    ]
    REQUIRED = ["Staff_ID", "Name", "Mobile", "Base_Salary", "Username", "Password"]

    def __init__(self, **kwargs):
        self.Staff_ID = ""
        self.Name = ""
        self.Role = "Booker"
        self.Mobile = ""
        self.Assigned_Area_ID = ""
        self.Assigned_Area_Name = ""
        self.Base_Salary = ""
        self.Username = ""
        self.Password = ""
        self.Account_Status = "Active"
        for key, value in kwargs.items():
            if key not in self.FIELDS:
                raise TypeError(f"Campo desconocido: {key}")
            value = "" if value is None else str(value)
            # La contraseña se respeta tal cual
            setattr(self, key, value if key == "Password" else value.strip())

    def missing_fields(self) -> List[str]:
        return [f for f in self.REQUIRED if not getattr(self, f)]

    def as_dict(self) -> Dict[str, str]:
        return {f: getattr(self, f) for f in self.FIELDS}
