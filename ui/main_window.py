import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import matplotlib.pyplot as plt
from controllers.staff_controller import StaffController
from models.staff_model import NewStaff, ROLES, STATUSES
from services.credentials_service import CredentialsService
from ui.dropdown_view import DropdownView, RoleFilterView
from ui.summary_view import SummaryView
from ui.table_view import TableView


class MainWindow:
    def __init__(self, controller=None):
        self.controller = controller or StaffController()

        self.window = tk.Tk()
        self.window.title("Gestión de Personal")
        self.window.geometry("1200x800")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.main_notebook = ttk.Notebook(self.window)
        self.main_notebook.pack(fill="both", expand=True, padx=10, pady=(10, 0))

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.progress = ttk.Progressbar(self.status_frame, mode='indeterminate', length=200)

        self.tab_add = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_add, text="➕ Agregar Empleado")
        self._setup_add_view()

        self.tab_status = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_status, text="🔄 Cambiar Estado")
        self._setup_status_view()

        self.tab_view = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_view, text="👥 Ver Personal")
        self._setup_staff_view()

        self.tab_reset = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_reset, text="🔑 Restablecer Contraseña")
        self._setup_reset_view()

        self.tab_delete = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_delete, text="🗑️ Eliminar Personal")
        self._setup_delete_view()

        self.tab_summary = ttk.Frame(self.main_notebook)
        self.main_notebook.add(self.tab_summary, text="📊 Resumen")
        self.view_summary = SummaryView(self.tab_summary, controller=self.controller)
        self.view_summary.pack(fill="both", expand=True, padx=10, pady=10)

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.progress.pack(side="right", padx=10)
        self.progress.start(10)
        self.window.update()
        try:
            func()
            self.lbl_status.config(text="✅ Listo")
        except Exception as e:
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.progress.stop()
            self.progress.pack_forget()
            self.window.config(cursor="")

    @staticmethod
    def _entry_row(parent, row, label, required=False, show=None):
        text = f"{label} *" if required else label
        ttk.Label(parent, text=text).grid(row=row, column=0, sticky="w", pady=4)
        entry = ttk.Entry(parent, width=40, show=show)
        entry.grid(row=row, column=1, sticky="w", padx=10)
        return entry

    # --- AGREGAR ---
    def _setup_add_view(self):
        form = ttk.LabelFrame(self.tab_add, text="Datos del Empleado")
        form.pack(fill="x", padx=20, pady=20)
        self.add_entries = {}
        labels = [
            ("Staff_ID", "ID de Personal (ej. BK-101)", True),
            ("Name", "Nombre", True),
            ("Mobile", "Móvil", True),
            ("Assigned_Area_ID", "ID de Área", False),
            ("Assigned_Area_Name", "Nombre de Área", False),
            ("Base_Salary", "Salario Base", True),
            ("Username", "Usuario", True),
            ("Password", "Contraseña", True),
        ]
        for i, (field, label, required) in enumerate(labels):
            self.add_entries[field] = self._entry_row(form, i, label, required)
        for field in ("Name", "Staff_ID"):
            self.add_entries[field].bind("<FocusOut>", lambda e: self._suggest_username())

        row = len(labels)
        ttk.Label(form, text="Rol *").grid(row=row, column=0, sticky="w", pady=4)
        self.dd_add_role = DropdownView(form, options=ROLES, on_select=lambda r: self._suggest_username())
        self.dd_add_role.grid(row=row, column=1, sticky="w")
        ttk.Label(form, text="Estado de Cuenta").grid(row=row + 1, column=0, sticky="w", pady=4)
        self.dd_add_status = DropdownView(form, options=STATUSES)
        self.dd_add_status.grid(row=row + 1, column=1, sticky="w")

        ttk.Button(self.tab_add, text="✅ Agregar Empleado",
                   command=lambda: self.run_task("Agregando empleado", self._add_staff)).pack(pady=10)

    def _suggest_username(self):
        if self.add_entries["Username"].get():
            return
        username = CredentialsService.suggest_username(
            self.add_entries["Name"].get(), self.add_entries["Staff_ID"].get(), self.dd_add_role.get_selected())
        if username:
            self.add_entries["Username"].insert(0, username)

    def _add_staff(self):
        form = NewStaff(Role=self.dd_add_role.get_selected(),
                        Account_Status=self.dd_add_status.get_selected(),
                        **{k: e.get() for k, e in self.add_entries.items()})
        username, password = self.controller.add_staff(form)
        messagebox.showinfo("Éxito", f"✅ Empleado agregado correctamente.\n\n"
                                     f"Usuario: {username}\nContraseña: {password}\n\n"
                                     f"⚠️ Guarde estas credenciales, no se volverán a mostrar.")
        for entry in self.add_entries.values(): entry.delete(0, tk.END)
        self.dd_add_role.set_selected(ROLES[0])
        self.dd_add_status.set_selected(STATUSES[0])

    # --- CAMBIAR ESTADO ---
    def _setup_status_view(self):
        form = ttk.LabelFrame(self.tab_status, text="Cambiar Estado de Cuenta")
        form.pack(fill="x", padx=20, pady=20)
        self.ent_status_id = self._entry_row(form, 0, "ID de Personal", True)
        self.ent_status_name = self._entry_row(form, 1, "Nombre", True)
        ttk.Label(form, text="Nuevo Estado").grid(row=2, column=0, sticky="w", pady=4)
        self.dd_status = DropdownView(form, options=STATUSES)
        self.dd_status.grid(row=2, column=1, sticky="w")
        ttk.Button(self.tab_status, text="🔄 Actualizar Estado",
                   command=lambda: self.run_task("Actualizando estado", self._change_status)).pack(pady=10)

    def _change_status(self):
        self.controller.change_status(self.ent_status_id.get(), self.ent_status_name.get(),
                                      self.dd_status.get_selected())
        messagebox.showinfo("Éxito", "✅ Estado actualizado correctamente.")
        if self.controller.last_warning: messagebox.showwarning("Aviso", self.controller.last_warning)
        self.ent_status_id.delete(0, tk.END)
        self.ent_status_name.delete(0, tk.END)
        self.dd_status.set_selected(STATUSES[0])
        self._refresh_staff_table()

    # --- VER PERSONAL ---
    def _setup_staff_view(self):
        ctrl = ttk.Frame(self.tab_view, relief=tk.GROOVE, borderwidth=1)
        ctrl.pack(fill="x", padx=10, pady=10)
        ttk.Button(ctrl, text="📥 Cargar Personal",
                   command=lambda: self.run_task("Cargando personal", self._load_staff)).pack(side="left", padx=10, pady=10)
        ttk.Separator(ctrl, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Label(ctrl, text="Rol:").pack(side="left")
        self.dd_role_filter = RoleFilterView(ctrl, on_select=self._on_role_select)
        self.dd_role_filter.pack(side="left", padx=10)
        ttk.Button(ctrl, text="💾 Exportar Excel", command=self.export_excel).pack(side="right", padx=10)
        self.table_staff = TableView(self.tab_view, on_search=self._on_search)
        self.table_staff.pack(fill="both", expand=True, padx=10, pady=10)

    def _load_staff(self):
        self.controller.load_staff()
        self._refresh_staff_table()
        self.main_notebook.select(self.tab_view)

    def _on_role_select(self, role):
        self.controller.set_role(role)
        self._refresh_staff_table()

    def _on_search(self, term):
        self.controller.set_search(term)
        self._refresh_staff_table()

    def _refresh_staff_table(self):
        if not self.controller.loaded: return
        self.table_staff.show_records(self.controller.filtered_staff, len(self.controller.staff_list))
        self.view_summary.refresh_charts()

    def export_excel(self):
        path = filedialog.asksaveasfilename(initialfile="Personal.xlsx", defaultextension=".xlsx",
                                            filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.view_summary.refresh_charts()
        self.run_task("Exportando personal", lambda: self.controller.export_staff(path, self.view_summary.fig))

    # --- RESTABLECER CONTRASEÑA ---
    def _setup_reset_view(self):
        form = ttk.LabelFrame(self.tab_reset, text="Restablecer Contraseña")
        form.pack(fill="x", padx=20, pady=20)
        self.ent_reset_id = self._entry_row(form, 0, "ID de Personal", True)
        self.ent_reset_name = self._entry_row(form, 1, "Nombre", True)
        self.ent_reset_password = self._entry_row(form, 2, "Nueva Contraseña", True)
        ttk.Button(form, text="🎲 Generar", command=self._generate_password).grid(row=2, column=2, padx=5)
        ttk.Label(self.tab_reset, text="La nueva contraseña se guarda como hash bcrypt.",
                  font=("Arial", 9, "italic")).pack()
        ttk.Button(self.tab_reset, text="🔑 Restablecer Contraseña", command=self._reset_password).pack(pady=10)

    def _generate_password(self):
        self.ent_reset_password.delete(0, tk.END)
        self.ent_reset_password.insert(0, CredentialsService.generate_password())

    def _reset_password(self):
        staff_id, name = self.ent_reset_id.get().strip(), self.ent_reset_name.get().strip()
        new_password = self.ent_reset_password.get()
        if not staff_id or not name or not new_password:
            messagebox.showwarning("Aviso", "Complete todos los campos.")
            return
        if not messagebox.askyesno("Confirmar", f"¿Restablecer la contraseña de {name} ({staff_id})?"):
            return

        def _do_reset():
            self.controller.reset_password(staff_id, name, new_password)
            messagebox.showinfo("Éxito", f"✅ Contraseña restablecida.\n\nID: {staff_id}\n"
                                         f"Nueva Contraseña: {new_password}\n\n⚠️ Compártala con el empleado.")
            if self.controller.last_warning: messagebox.showwarning("Aviso", self.controller.last_warning)
            for entry in (self.ent_reset_id, self.ent_reset_name, self.ent_reset_password):
                entry.delete(0, tk.END)
            self._refresh_staff_table()
        self.run_task("Restableciendo contraseña", _do_reset)

    # --- ELIMINAR ---
    def _setup_delete_view(self):
        form = ttk.LabelFrame(self.tab_delete, text="Eliminar Personal")
        form.pack(fill="x", padx=20, pady=20)
        self.ent_delete_id = self._entry_row(form, 0, "ID de Personal", True)
        self.ent_delete_name = self._entry_row(form, 1, "Nombre", True)
        ttk.Label(self.tab_delete, text="⚠️ Esta acción no se puede deshacer.", foreground="red").pack()
        ttk.Button(self.tab_delete, text="🗑️ Eliminar", command=self._delete_staff).pack(pady=10)

    def _delete_staff(self):
        staff_id, name = self.ent_delete_id.get().strip(), self.ent_delete_name.get().strip()
        if not staff_id or not name:
            messagebox.showwarning("Aviso", "Ingrese el ID y el nombre del empleado.")
            return
        if not messagebox.askyesno("Confirmar", f"¿Eliminar permanentemente a {name} ({staff_id})?"):
            return

        def _do_delete():
            self.controller.delete_staff(staff_id, name)
            messagebox.showinfo("Éxito", "✅ Empleado eliminado.")
            if self.controller.last_warning: messagebox.showwarning("Aviso", self.controller.last_warning)
            self.ent_delete_id.delete(0, tk.END)
            self.ent_delete_name.delete(0, tk.END)
            self._refresh_staff_table()
            self.main_notebook.select(self.tab_view)
        self.run_task("Eliminando empleado", _do_delete)

    def on_closing(self):
        if messagebox.askokcancel("Salir", "¿Seguro que quieres salir?"):
            plt.close('all')
            self.window.destroy()

    def run(self): self.window.mainloop()
