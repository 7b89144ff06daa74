import unittest
from datetime import date

from ticklist.core.models import Task


class TestTaskToDict(unittest.TestCase):
    def test_record_fields(self) -> None:
        t = Task(id="a1", text="buy milk", created_at=1700000000000, due=date(2024, 3, 1))
        assert t.to_dict() == {
            "id": "a1",
            "text": "buy milk",
            "due": "2024-03-01",
            "completed": False,
            "createdAt": 1700000000000,
        }

    def test_no_due_is_null(self) -> None:
        t = Task(id="a1", text="x", created_at=1, completed=True)
        d = t.to_dict()
        assert d["due"] is None
        assert d["completed"] is True


class TestTaskFromDict(unittest.TestCase):
    def test_valid_record(self) -> None:
        r = Task.from_dict({"id": "a", "text": "t", "due": "2024-01-15", "completed": True, "createdAt": 5})
        assert r.is_ok()
        t = r.unwrap()
        assert t == Task(id="a", text="t", created_at=5, due=date(2024, 1, 15), completed=True)

    def test_to_dict_from_dict_identity(self) -> None:
        t = Task(id="a", text="t", created_at=42, due=None, completed=False)
        assert Task.from_dict(t.to_dict()).unwrap() == t

    def test_not_a_dict(self) -> None:
        assert Task.from_dict(["a"]).is_err()
        assert Task.from_dict(None).is_err()

    def test_missing_fields(self) -> None:
        r = Task.from_dict({"id": "a", "text": "t"})
        assert r.is_err()

    def test_blank_text_rejected(self) -> None:
        r = Task.from_dict({"id": "a", "text": "  ", "due": None, "completed": False, "createdAt": 1})
        assert r.is_err()
        assert "text" in r.unwrap_err()

    def test_bool_created_at_rejected(self) -> None:
        r = Task.from_dict({"id": "a", "text": "t", "due": None, "completed": False, "createdAt": True})
        assert r.is_err()

    def test_string_completed_rejected(self) -> None:
        r = Task.from_dict({"id": "a", "text": "t", "due": None, "completed": "yes", "createdAt": 1})
        assert r.is_err()

    def test_bad_due_rejected(self) -> None:
        r = Task.from_dict({"id": "a", "text": "t", "due": "2024-13-40", "completed": False, "createdAt": 1})
        assert r.is_err()
        assert "a" in r.unwrap_err()

    def test_frozen(self) -> None:
        t = Task(id="a", text="t", created_at=1)
        with self.assertRaises(AttributeError):
            t.completed = True  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
