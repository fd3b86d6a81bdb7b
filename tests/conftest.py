import pytest

from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO
from services.expense_service import ExpenseService
from services.report_service import ReportService


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "expenses.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def dao(db):
    return ExpenseDAO(db)


@pytest.fixture
def service(db, dao):
    return ExpenseService(db, dao)


@pytest.fixture
def reports(service):
    return ReportService(service)
