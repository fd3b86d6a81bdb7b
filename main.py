import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO

from services.expense_service import ExpenseService
from services.report_service import ReportService

from ui.app_window import AppWindow

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open_default()

    # ── DAOs & services ──────────────────────────────────────────────────────
    expense_dao = ExpenseDAO(db)
    expense_svc = ExpenseService(db, expense_dao)
    report_svc = ReportService(expense_svc)

    # ── Appearance ───────────────────────────────────────────────────────────
    appearance = db.get_setting("appearance_mode", "system")
    currency_symbol = db.get_setting("currency_symbol", "$")
    ctk.set_appearance_mode(appearance)
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        expense_service=expense_svc,
        report_service=report_svc,
        currency_symbol=currency_symbol,
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    logger.info("Starting %s", app.title())
    app.mainloop()


if __name__ == "__main__":
    main()
