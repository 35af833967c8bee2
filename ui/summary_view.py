from tkinter import ttk
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

ROLE_COLORS = {"Manager": "mediumpurple", "Booker": "cornflowerblue", "Rider": "mediumseagreen"}
STATUS_COLORS = {"Active": "mediumseagreen", "Inactive": "indianred"}


# ========================================================
#  RESUMEN DEL PERSONAL (ROL / ESTADO)
# ========================================================
class SummaryView(ttk.Frame):
    def __init__(self, parent, controller=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.controller = controller

        ctrl = ttk.Frame(self)
        ctrl.pack(fill="x", padx=5, pady=5)
        ttk.Label(ctrl, text="Distribución del Personal", font=("Arial", 11, "bold")).pack(side="left")
        ttk.Button(ctrl, text="🔄 Actualizar Gráficas", command=self.refresh_charts).pack(side="right")
        self.lbl_total = ttk.Label(ctrl, text="")
        self.lbl_total.pack(side="right", padx=10)

        self.fig, (self.ax_roles, self.ax_status) = plt.subplots(1, 2, figsize=(9, 4), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True, padx=10, pady=10)

    def refresh_charts(self):
        if not self.controller: return
        roles = self.controller.get_role_summary()
        statuses = self.controller.get_status_summary(include_empty=False)
        self.lbl_total.config(text=f"Total: {len(self.controller.staff_list)} empleados")

        # ROLES
        self.ax_roles.clear()
        labels = list(roles.keys())
        x_pos = range(len(labels))
        colors = [ROLE_COLORS.get(l, "lightgray") for l in labels]
        bars = self.ax_roles.bar(x_pos, list(roles.values()), color=colors, align="center")
        self.ax_roles.bar_label(bars, fontsize=9)
        self.ax_roles.set_xticks(x_pos)
        self.ax_roles.set_xticklabels(labels, rotation=30, ha="right", fontsize=9)
        self.ax_roles.set_ylabel("Empleados")
        self.ax_roles.set_title("Por Rol")

        # ESTADO
        self.ax_status.clear()
        values = list(statuses.values())
        if sum(values) > 0:
            self.ax_status.pie(values, labels=list(statuses.keys()), autopct="%1.1f%%", startangle=90,
                               colors=[STATUS_COLORS.get(s, "lightgray") for s in statuses],
                               textprops={"fontsize": 8})
        self.ax_status.set_title("Por Estado de Cuenta")

        self.fig.tight_layout()
        self.canvas.draw()
