import customtkinter as ctk

from models.expense import Expense
from utils.constants import COLORS
from utils.currency import format_currency


class ExpenseList(ctk.CTkScrollableFrame):
    """Newest-first list of expenses, each row with a delete button."""

    def __init__(self, master, on_delete, currency_symbol: str = "$", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_delete = on_delete   # callable(expense_id)
        self._symbol = currency_symbol
        self.grid_columnconfigure(0, weight=1)

    def set_expenses(self, expenses: list[Expense]):
        for w in self.winfo_children():
            w.destroy()

        if not expenses:
            ctk.CTkLabel(
                self, text="No expenses yet.",
                text_color=COLORS["sand_brown"],
            ).grid(row=0, column=0, pady=24)
            return

        for idx, exp in enumerate(expenses):
            self._add_row(idx, exp)

    def _add_row(self, idx, exp: Expense):
        row = ctk.CTkFrame(self, fg_color=COLORS["accent_brown"], corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", pady=4)
        row.grid_columnconfigure(0, weight=1)

        text_col = ctk.CTkFrame(row, fg_color="transparent")
        text_col.grid(row=0, column=0, sticky="w", padx=12, pady=8)
        ctk.CTkLabel(
            text_col, text=format_currency(exp.amount, self._symbol),
            font=ctk.CTkFont(size=18, weight="bold"),
            text_color=COLORS["sand_brown"], anchor="w",
        ).pack(anchor="w")
        ctk.CTkLabel(
            text_col, text=exp.category,
            font=ctk.CTkFont(size=14),
            text_color=COLORS["light_sand"], anchor="w",
        ).pack(anchor="w")
        if exp.note:
            ctk.CTkLabel(
                text_col, text=exp.note,
                font=ctk.CTkFont(size=12),
                text_color=COLORS["sand_brown"], anchor="w",
            ).pack(anchor="w")

        ctk.CTkButton(
            row, text="✕", width=32, height=32,
            fg_color="transparent", hover_color=COLORS["dark_brown"],
            text_color=COLORS["delete"], font=ctk.CTkFont(size=20),
            command=lambda i=exp.id: self._on_delete(i),
        ).grid(row=0, column=1, padx=(4, 12))
