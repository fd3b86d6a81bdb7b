import tkinter as tk

import customtkinter as ctk
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from utils.constants import COLORS
from utils.currency import format_currency


class CategoryChart(ctk.CTkFrame):
    """Pie chart of spending per category with a colour legend."""

    def __init__(self, master, currency_symbol: str = "$", **kwargs):
        super().__init__(master, fg_color=COLORS["sand_brown"], corner_radius=8, **kwargs)
        self._symbol = currency_symbol

        ctk.CTkLabel(
            self, text="Spending by Category",
            font=ctk.CTkFont(size=18),
            text_color=COLORS["dark_text"],
        ).pack(pady=(10, 0))

        self._fig = Figure(figsize=(3, 2.4), dpi=80, tight_layout=True)
        self._fig.patch.set_facecolor(COLORS["sand_brown"])
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 4))

        self._legend_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._legend_frame.pack(fill="x", padx=12, pady=(0, 10))

    def set_breakdown(self, breakdown: list[dict]):
        """breakdown: [{category, total, color_hex}, ...] as from ReportService."""
        self._draw_pie(breakdown)

        for w in self._legend_frame.winfo_children():
            w.destroy()
        for item in breakdown:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=item["color_hex"], width=2).pack(side="left", padx=(0, 6))
            ctk.CTkLabel(
                row, text=f"{item['category']}: {format_currency(item['total'], self._symbol)}",
                anchor="w", font=ctk.CTkFont(size=14),
                text_color=COLORS["dark_text"],
            ).pack(side="left")

    def _draw_pie(self, breakdown):
        ax = self._ax
        ax.clear()
        ax.set_axis_off()
        ax.set_facecolor(COLORS["sand_brown"])

        total = sum(d["total"] for d in breakdown)
        if not breakdown or total <= 0:
            ax.text(0.5, 0.5, "No expense data", ha="center", va="center",
                    transform=ax.transAxes, color=COLORS["dark_brown"])
            self._mpl.draw_idle()
            return

        ax.pie(
            [d["total"] for d in breakdown],
            colors=[d["color_hex"] for d in breakdown],
            startangle=90,
            wedgeprops={"edgecolor": COLORS["sand_brown"]},
        )
        ax.set_aspect("equal")
        self._mpl.draw_idle()
