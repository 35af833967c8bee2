import tkinter as tk
from tkinter import ttk

# Columnas visibles en la lista de personal (el resto de la hoja se ignora)
STAFF_COLUMNS = ["Staff_ID", "Name", "Role", "Mobile", "Assigned_Area_Name",
                 "Base_Salary", "Username", "Account_Status"]


class TableView(ttk.Frame):
    """
    Tabla de personal con caja de búsqueda.
    on_search recibe (term: str); el filtrado lo hace el controlador.
    """

    def __init__(self, parent, on_search=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_search = on_search
        control_frame = ttk.Frame(self)
        control_frame.pack(fill="x", pady=(0, 5))
        ttk.Label(control_frame, text="Buscar (nombre, ID, móvil, usuario):").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(control_frame, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        self.clear_search_btn = ttk.Button(control_frame, text="Limpiar", command=self._clear_search)
        self.clear_search_btn.pack(side="left")
        self.status_label = ttk.Label(control_frame, text="")
        self.status_label.pack(side="right")
        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, show="headings")
        self._tree.pack(side="left", fill="both", expand=True)
        self._scroll_y = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        self._scroll_y.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=self._scroll_y.set)
        self._scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._tree.xview)
        self._scroll_x.pack(side="bottom", fill="x")
        self._tree.configure(xscrollcommand=self._scroll_x.set)

    def _on_search(self, event=None):
        if self.on_search:
            self.on_search(self.search_var.get())

    def _clear_search(self):
        self.search_var.set("")
        self._on_search()

    def clear(self):
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()

    def show_records(self, records, total, columns=None):
        columns = columns or STAFF_COLUMNS
        self.clear()
        self._tree["columns"] = tuple(columns)
        for col in columns:
            self._tree.heading(col, text=col.replace("_", " "))
            self._tree.column(col, anchor="w", width=140)
        for record in records:
            self._tree.insert("", "end", values=tuple(record.get(col, "") for col in columns))
        self.status_label.config(text=f"Mostrando {len(records)} de {total} empleados")
