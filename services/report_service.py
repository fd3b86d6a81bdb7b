from models.expense import Expense
from services.expense_service import ExpenseService
from utils.constants import CSV_HEADER, PIE_CHART_COLORS


class ReportService:
    def __init__(self, expense_service: ExpenseService):
        self._expense_svc = expense_service

    def get_category_breakdown(self, expenses: list[Expense] | None = None) -> list[dict]:
        """Return [{category, total, color_hex}, ...] for the pie chart.

        Colours cycle through the palette in first-seen category order.
        """
        totals = self._expense_svc.category_totals(expenses)
        return [
            {
                "category": t.category,
                "total": t.total,
                "color_hex": PIE_CHART_COLORS[i % len(PIE_CHART_COLORS)],
            }
            for i, t in enumerate(totals)
        ]

    def get_summary(self, expenses: list[Expense] | None = None) -> dict:
        if expenses is None:
            expenses = self._expense_svc.list_all()
        return {
            "count": len(expenses),
            "total": sum(e.amount for e in expenses),
        }

    def export_csv(self) -> list[list[str]]:
        """Return rows suitable for CSV export, newest first."""
        rows = [list(CSV_HEADER)]
        for exp in self._expense_svc.list_all():
            rows.append([
                str(exp.id),
                exp.category,
                f"{exp.amount:.2f}",
                exp.note or "",
            ])
        return rows
