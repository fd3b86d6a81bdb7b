import sqlite3

from database.db_manager import DatabaseManager
from models.expense import Expense
from utils.errors import StorageError


class ExpenseDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Expense:
        return Expense(
            id=row["id"],
            amount=row["amount"],
            category=row["category"],
            note=row["note"],
        )

    def get_all(self) -> list[Expense]:
        """Newest first."""
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM expenses ORDER BY id DESC"
            ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot read expenses: {exc}") from exc
        return [self._row_to_model(r) for r in rows]

    def create(self, amount: float, category: str, note: str | None = None) -> int:
        """Insert one row and return its new id."""
        conn = self._db.get_connection()
        try:
            cursor = conn.execute(
                "INSERT INTO expenses(amount, category, note) VALUES (?, ?, ?)",
                (amount, category, note),
            )
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Cannot save expense: {exc}") from exc
        return cursor.lastrowid

    def delete(self, expense_id: int) -> bool:
        """Returns False when no row had that id."""
        conn = self._db.get_connection()
        try:
            cursor = conn.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Cannot delete expense {expense_id}: {exc}") from exc
        return cursor.rowcount > 0
