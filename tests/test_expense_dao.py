import pytest

from utils.errors import StorageError


def test_get_all_empty(dao):
    assert dao.get_all() == []


def test_create_returns_increasing_ids(dao):
    first = dao.create(1.0, "Food")
    second = dao.create(2.0, "Rent", "march")
    assert second > first


def test_get_all_newest_first(dao):
    ids = [dao.create(float(n), "Food") for n in range(1, 5)]
    assert [e.id for e in dao.get_all()] == sorted(ids, reverse=True)


def test_create_stores_values(dao):
    new_id = dao.create(9.99, "Books", "novel")
    [exp] = dao.get_all()
    assert (exp.id, exp.amount, exp.category, exp.note) == (new_id, 9.99, "Books", "novel")


def test_null_note_reads_as_none(dao):
    dao.create(4.0, "Coffee", None)
    assert dao.get_all()[0].note is None


def test_delete_reports_whether_row_existed(dao):
    new_id = dao.create(1.0, "Food")
    assert dao.delete(new_id) is True
    assert dao.delete(new_id) is False
    assert dao.get_all() == []


def test_ids_not_reused_after_delete(dao):
    first = dao.create(1.0, "Food")
    dao.delete(first)
    second = dao.create(1.0, "Food")
    assert second > first


def test_sqlite_errors_become_storage_errors(db, dao):
    db.get_connection().execute("DROP TABLE expenses")
    with pytest.raises(StorageError):
        dao.get_all()
    with pytest.raises(StorageError):
        dao.create(1.0, "Food")
    with pytest.raises(StorageError):
        dao.delete(1)
