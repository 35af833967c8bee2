from tkinter import ttk

from models.staff_model import ALL_ROLES, ROLES


class DropdownView(ttk.Frame):
    """
    Combobox readonly; on_select recibe (selected_value: str)
    """

    def __init__(self, parent, options=None, default=None, on_select=None, width=18, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_select = on_select
        self._combobox = ttk.Combobox(self, state="readonly", width=width, font=("Arial", 10))
        self._combobox.pack(fill="x", padx=6, pady=6)
        self._combobox.bind("<<ComboboxSelected>>", self._handle_select)
        self.update_options(options or [], default)

    def update_options(self, options, default=None):
        self._combobox["values"] = list(options)
        if default is not None:
            self._combobox.set(default)
        elif options:
            self._combobox.set(options[0])

    def _handle_select(self, event):
        if self.on_select:
            self.on_select(self._combobox.get())

    def get_selected(self):
        return self._combobox.get()

    def set_selected(self, value):
        self._combobox.set(value)


class RoleFilterView(DropdownView):
    def __init__(self, parent, on_select=None, **kwargs):
        super().__init__(parent, options=[ALL_ROLES] + ROLES, default=ALL_ROLES,
                         on_select=on_select, **kwargs)
