"""
Pytest configuration and fixtures
"""
from datetime import date
from typing import List

import pytest
from core.notifier import TransientNotifier
from exceptions.custom_errors import ApiRequestError
from schemas.nurse import Nurse


def make_nurse(nurse_id, name, license_number, dob, age=None) -> Nurse:
    data = {"id": nurse_id, "name": name, "license_number": license_number, "dob": dob}
    if age is not None:
        data["age"] = age
    return Nurse.model_validate(data)


@pytest.fixture
def nurses() -> List[Nurse]:
    """Five nurses in arrival order, all with distinct values in every column"""
    return [
        make_nurse(1, "Carla Diaz", "LN300", "1990-05-01T00:00:00.000Z", 34),
        make_nurse(2, "Alice Brown", "LN500", "1985-11-20", 38),
        make_nurse(3, "Eve Moss", "LN100", "2000-01-15", 24),
        make_nurse(4, "Bob Stone", "LN400", "1978-07-04", 46),
        make_nurse(5, "Dan Price", "LN200", "1995-02-28", 29),
    ]


class FakeNurseClient:
    """In-memory stand-in for NurseApiClient that records every call"""

    def __init__(self, nurses=(), fail_on=None, error=None):
        self.rows = {n.id: n for n in nurses}
        self.calls = []
        self.fail_on = set(fail_on or ())
        self.error = error or ApiRequestError(None, detail="boom")
        self.next_id = 100

    def _maybe_fail(self, op):
        if op in self.fail_on:
            raise self.error

    def list_nurses(self):
        self.calls.append(("list",))
        self._maybe_fail("list")
        return list(self.rows.values())

    def create_nurse(self, draft):
        self.calls.append(("create", draft.payload()))
        self._maybe_fail("create")
        nurse = Nurse.model_validate({"id": self.next_id, **draft.payload()})
        self.rows[nurse.id] = nurse
        self.next_id += 1
        return {"data": nurse.model_dump(mode="json")}

    def update_nurse(self, nurse_id, draft):
        self.calls.append(("update", nurse_id, draft.payload()))
        self._maybe_fail("update")
        self.rows[nurse_id] = Nurse.model_validate({"id": nurse_id, **draft.payload()})
        return {"data": self.rows[nurse_id].model_dump(mode="json")}

    def delete_nurse(self, nurse_id):
        self.calls.append(("delete", nurse_id))
        self._maybe_fail("delete")
        del self.rows[nurse_id]
        return {"message": "deleted"}

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_client(nurses):
    return FakeNurseClient(nurses)


@pytest.fixture
def seen_messages():
    return []


@pytest.fixture
def notifier(seen_messages):
    """Notifier with a short delay that records every state it passes through"""
    return TransientNotifier(delay=0.02, on_change=seen_messages.append)


@pytest.fixture
def adult_dob() -> date:
    return date(1990, 6, 1)
