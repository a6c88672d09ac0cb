from datetime import datetime
from typing import Iterable, List, Optional, Union
from schemas.nurse import Nurse


class RecordStore:
    """All nurse records as last fetched from the backend, replaced wholesale on every fetch."""

    def __init__(self, records: Iterable[Nurse] = ()):
        self._records: List[Nurse] = list(records)
        self.last_refreshed: Optional[datetime] = None

    @property
    def records(self) -> List[Nurse]:
        return list(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def replace(self, records: Iterable[Nurse]):
        self._records = list(records)
        self.last_refreshed = datetime.now()

    def get(self, nurse_id: Union[int, str]) -> Optional[Nurse]:
        return next((n for n in self._records if str(n.id) == str(nurse_id)), None)
