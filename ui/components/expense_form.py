import logging

import customtkinter as ctk

from services.expense_service import ExpenseService
from utils.constants import COLORS
from utils.errors import StorageError

logger = logging.getLogger(__name__)


class ExpenseForm(ctk.CTkFrame):
    """Inline amount / category / note entry with an Add button."""

    def __init__(self, master, expense_service: ExpenseService, on_saved, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = expense_service
        self._on_saved = on_saved

        self.grid_columnconfigure(0, weight=1)

        # Placeholder text only shows on entries without a textvariable
        self._amount_entry = self._entry(0, "Amount (e.g. 12.50)")
        self._category_entry = self._entry(1, "Category (Food, Books, Rent...)")
        self._note_entry = self._entry(2, "Note (optional)")

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color=COLORS["delete"], wraplength=420, anchor="w",
        ).grid(row=3, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="Add Expense",
            fg_color=COLORS["accent_brown"], hover_color=COLORS["dark_text"],
            command=self._on_add,
        ).grid(row=4, column=0, sticky="ew", pady=(4, 0))

    def _entry(self, row, placeholder) -> ctk.CTkEntry:
        entry = ctk.CTkEntry(
            self, placeholder_text=placeholder,
            fg_color=COLORS["light_sand"], text_color=COLORS["dark_brown"],
            placeholder_text_color=COLORS["accent_brown"],
            border_color=COLORS["accent_brown"], border_width=1, corner_radius=8,
        )
        entry.grid(row=row, column=0, sticky="ew", pady=4)
        entry.bind("<Return>", lambda _e: self._on_add())
        return entry

    def _on_add(self):
        try:
            self._svc.add(
                self._amount_entry.get(),
                self._category_entry.get(),
                self._note_entry.get(),
            )
        except StorageError as e:
            logger.exception("Saving expense failed")
            self.show_error(str(e))
            return
        except ValueError as e:
            # Rejected input stays in the fields
            self.show_error(str(e))
            return

        self.show_error("")
        for entry in (self._amount_entry, self._category_entry, self._note_entry):
            entry.delete(0, "end")
        self.focus_set()
        self._on_saved()

    def show_error(self, message: str):
        self._error_var.set(message)
