import csv
import logging
from tkinter import filedialog

import customtkinter as ctk

from services.expense_service import ExpenseService
from services.report_service import ReportService
from ui.components.category_chart import CategoryChart
from ui.components.expense_form import ExpenseForm
from ui.components.expense_list import ExpenseList
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, COLORS
from utils.currency import format_currency
from utils.errors import StorageError

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    """The single expense screen: chart, entry form, list, footer.

    The window owns the displayed list; after every add or delete it re-reads
    everything from the expense service.
    """

    def __init__(
        self,
        expense_service: ExpenseService,
        report_service: ReportService,
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(fg_color=COLORS["dark_brown"], **kwargs)
        self._expense_svc = expense_service
        self._report_svc = report_service
        self._symbol = currency_symbol

        self.title(APP_NAME)
        self.minsize(APP_WIDTH - 100, APP_HEIGHT - 200)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)

        self._build_header()
        self._build_chart()
        self._build_form()
        self._build_list()
        self._build_footer()
        self.refresh()

    # ── Layout ──────────────────────────────────────────────────────────────
    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))
        bar.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            bar, text=APP_NAME,
            font=ctk.CTkFont(size=24, weight="bold"),
            text_color=COLORS["sand_brown"], anchor="w",
        ).grid(row=0, column=0, sticky="w")
        ctk.CTkButton(
            bar, text="Export CSV", width=100,
            fg_color="transparent", border_width=1,
            border_color=COLORS["accent_brown"], text_color=COLORS["sand_brown"],
            hover_color=COLORS["accent_brown"],
            command=self._export_csv,
        ).grid(row=0, column=1, sticky="e")

        self._summary_var = ctk.StringVar()
        ctk.CTkLabel(
            bar, textvariable=self._summary_var,
            text_color=COLORS["accent_brown"], anchor="w",
        ).grid(row=1, column=0, columnspan=2, sticky="w")

    def _build_chart(self):
        self._chart = CategoryChart(self, currency_symbol=self._symbol)
        # Gridded in refresh() only when there is something to show
        self._chart_visible = False

    def _build_form(self):
        self._form = ExpenseForm(self, self._expense_svc, on_saved=self.refresh)
        self._form.grid(row=2, column=0, sticky="ew", padx=16, pady=(0, 12))

    def _build_list(self):
        self._list = ExpenseList(
            self, on_delete=self._on_delete, currency_symbol=self._symbol,
        )
        self._list.grid(row=4, column=0, sticky="nsew", padx=12)

    def _build_footer(self):
        ctk.CTkLabel(
            self, text="Enter your expenses and they'll be saved locally with SQLite.",
            font=ctk.CTkFont(size=12),
            text_color=COLORS["accent_brown"],
        ).grid(row=5, column=0, pady=(8, 12))

    # ── Refresh ──────────────────────────────────────────────────────────────
    def refresh(self):
        expenses = self._expense_svc.list_all()
        self._list.set_expenses(expenses)

        summary = self._report_svc.get_summary(expenses)
        noun = "expense" if summary["count"] == 1 else "expenses"
        self._summary_var.set(
            f"{summary['count']} {noun} · {format_currency(summary['total'], self._symbol)}"
        )

        if expenses:
            self._chart.set_breakdown(self._report_svc.get_category_breakdown(expenses))
            if not self._chart_visible:
                self._chart.grid(row=1, column=0, sticky="ew", padx=16, pady=(0, 16))
                self._chart_visible = True
        elif self._chart_visible:
            self._chart.grid_remove()
            self._chart_visible = False

    def _on_delete(self, expense_id: int):
        try:
            self._expense_svc.delete(expense_id)
        except StorageError as e:
            logger.exception("Deleting expense %s failed", expense_id)
            self._form.show_error(str(e))
            return
        self._form.show_error("")
        self.refresh()

    def _export_csv(self):
        try:
            rows = self._report_svc.export_csv()
        except StorageError as e:
            logger.exception("Reading expenses for export failed")
            self._form.show_error(str(e))
            return

        path = filedialog.asksaveasfilename(
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
            initialfile="expenses.csv",
        )
        if not path:
            return
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        logger.info("Exported %d expenses to %s", len(rows) - 1, path)
