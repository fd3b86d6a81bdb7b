"""The expense ledger: add, list, delete and per-category totals.

The service holds no records of its own; every read goes back to SQLite, so
callers re-invoke ``list_all()`` after a mutation.
"""
import logging
from typing import Iterable

from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO
from models.category_total import CategoryTotal
from models.expense import Expense
from utils.constants import OTHER_CATEGORY
from utils.currency import parse_amount
from utils.errors import ValidationError

logger = logging.getLogger(__name__)


def category_totals(records: Iterable[Expense]) -> list[CategoryTotal]:
    """Sum amounts per category, in first-seen order.

    Records with a missing or blank category are grouped under "Other".
    """
    totals: dict[str, CategoryTotal] = {}
    for exp in records:
        name = exp.category if exp.category and exp.category.strip() else OTHER_CATEGORY
        if name not in totals:
            totals[name] = CategoryTotal(category=name)
        totals[name].total += exp.amount or 0.0
    return list(totals.values())


class ExpenseService:
    def __init__(self, db: DatabaseManager, expense_dao: ExpenseDAO):
        self._db = db
        self._dao = expense_dao

    def initialize(self):
        self._db.initialize()

    def list_all(self) -> list[Expense]:
        expenses = self._dao.get_all()
        logger.debug("Loaded %d expenses", len(expenses))
        return expenses

    def add(self, amount, category: str | None, note: str | None = None) -> None:
        """Validate and persist one expense.

        Raises ValidationError (nothing written) for a non-positive or
        non-numeric amount, a category that is not text or is blank after
        trimming, or a note that is not text.
        """
        value = parse_amount(amount)
        if not isinstance(category, str) or not category.strip():
            raise ValidationError("Category cannot be empty.")
        if note is not None and not isinstance(note, str):
            raise ValidationError("Note must be text.")
        category = category.strip()
        note = (note or "").strip() or None

        new_id = self._dao.create(value, category, note)
        logger.info("Added expense %d: %.2f in %r", new_id, value, category)

    def delete(self, expense_id: int) -> None:
        if self._dao.delete(expense_id):
            logger.info("Deleted expense %s", expense_id)
        else:
            logger.debug("Delete ignored, no expense with id %s", expense_id)

    def category_totals(self, records: Iterable[Expense] | None = None) -> list[CategoryTotal]:
        """Totals over ``records``, or over a fresh ``list_all()`` when omitted."""
        if records is None:
            records = self.list_all()
        return category_totals(records)
