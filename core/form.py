from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple
from core.age import max_birth_date
from exceptions.custom_errors import MissingFieldError, UnderageNurseError
from schemas.nurse import Nurse, NurseDraft
from utils.constants import MIN_AGE

UNDERAGE_MESSAGE = f"Nurse must be at least {MIN_AGE} years old!"
MISSING_FIELDS_MESSAGE = "Please fill in all required fields"

EDITABLE_FIELDS = ("name", "license_number", "dob")
EARLIEST_DOB = date(1900, 1, 1)


@dataclass(frozen=True)
class Submission:
    """What the form hands over once it passes local validation."""

    draft: NurseDraft
    target: Optional[Nurse] = None

    @property
    def is_update(self) -> bool:
        return self.target is not None


class FormController:
    """
    State of the add/edit dialog.

    ``target`` is the nurse being edited, or None when adding. The draft's age
    is recomputed from its date of birth on every read; there is no way to set
    it directly.
    """

    def __init__(self):
        self.draft = NurseDraft()
        self.target: Optional[Nurse] = None
        self.is_open = False

    @property
    def is_editing(self) -> bool:
        return self.target is not None

    @property
    def title(self) -> str:
        return "Edit Nurse" if self.is_editing else "Add New Nurse"

    @property
    def submit_label(self) -> str:
        return "Update Nurse" if self.is_editing else "Add Nurse"

    @property
    def age(self) -> Optional[int]:
        return self.draft.age

    def dob_bounds(self, today: Optional[date] = None) -> Tuple[date, date]:
        """
        Range for the date-of-birth input.

        Widened to take in the date already on the draft, so a record outside
        the usual range can still be opened; ``validate`` rejects it on submit.
        """
        low, high = EARLIEST_DOB, max_birth_date(today)
        dob = self.draft.dob
        if dob is not None:
            low, high = min(low, dob), max(high, dob)
        return low, high

    def open_create(self):
        self.target = None
        self.draft = NurseDraft()
        self.is_open = True

    def open_edit(self, nurse: Nurse):
        self.target = nurse
        self.draft = NurseDraft.from_nurse(nurse)
        self.is_open = True

    def set_field(self, name: str, value: Any):
        if name not in EDITABLE_FIELDS:
            raise KeyError(f"{name!r} is not an editable field")
        setattr(self.draft, name, value)

    def cancel(self):
        self.is_open = False

    def validate(self) -> Optional[str]:
        """Local error message for the current draft, or None when it can be sent."""
        draft = self.draft
        if not draft.name.strip() or not draft.license_number.strip() or draft.dob is None:
            return MISSING_FIELDS_MESSAGE
        if draft.age < MIN_AGE:
            return UNDERAGE_MESSAGE
        return None

    def submit(self) -> Submission:
        """
        Close the dialog and hand the draft over for sending.

        Raises MissingFieldError or UnderageNurseError without closing the
        dialog when the draft fails local validation.
        """
        error = self.validate()
        if error == MISSING_FIELDS_MESSAGE:
            raise MissingFieldError(error)
        if error == UNDERAGE_MESSAGE:
            raise UnderageNurseError(error)

        # closed before the request goes out so the same form can't be sent twice
        self.is_open = False
        return Submission(draft=self.draft.model_copy(), target=self.target)
