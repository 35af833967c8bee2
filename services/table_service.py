import re
from typing import Any, List
from models.staff_model import ALL_ROLES, SEARCH_FIELDS, Record, StaffTable

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


class TableService:
    """
    Convierte la respuesta tabular de la API de hojas en registros.
    - data[0] es el encabezado, data[1:] son las filas.
    - Filas cortas se rellenan con "" hasta el largo del encabezado.
    """

    @staticmethod
    def normalize_header(header: Any) -> str:
        return _INVALID_CHARS.sub("_", str(header).strip())

    @staticmethod
    def to_table(api_data: Any) -> StaffTable:
        # 1. Validar la forma del payload; cualquier cosa rara es una tabla vacía
        if not isinstance(api_data, dict):
            return StaffTable()
        rows = api_data.get("data")
        if not isinstance(rows, (list, tuple)) or len(rows) == 0:
            return StaffTable()

        # 2. Encabezados
        header_row = rows[0] if isinstance(rows[0], (list, tuple)) else []
        columns = [TableService.normalize_header(h) for h in header_row]

        # 3. Filas -> registros (si dos columnas colisionan, gana la última)
        records = []
        for row in rows[1:]:
            if not isinstance(row, (list, tuple)):
                row = []
            record = {}
            for j, col in enumerate(columns):
                value = row[j] if j < len(row) else None
                record[col] = "" if value is None else value
            records.append(record)

        return StaffTable(columns=list(dict.fromkeys(columns)), records=records)

    @staticmethod
    def transform(api_data: Any) -> List[Record]:
        return TableService.to_table(api_data).records

    @staticmethod
    def matches_search(record: Record, term: str) -> bool:
        term = term.lower()
        for field in SEARCH_FIELDS:
            value = record.get(field)
            if value and term in str(value).lower():
                return True
        return False

    @staticmethod
    def filter_records(records: List[Record], role: str = ALL_ROLES, term: str = "") -> List[Record]:
        """Rol exacto + búsqueda libre, siempre sobre la lista completa."""
        filtered = records
        if role and role != ALL_ROLES:
            filtered = [r for r in filtered if r.get("Role") == role]
        if term:
            filtered = [r for r in filtered if TableService.matches_search(r, term)]
        return list(filtered)
