import asyncio
from datetime import date
from typing import Optional
from core.form import FormController
from core.notifier import TransientNotifier
from core.pagination import Page, PageState, clamp_page, go_to_page, paginate, reset_page, set_page_size
from core.sorting import SortState, sort_records, toggle_sort
from core.store import RecordStore
from exceptions.custom_errors import FORM_ERRORS, ApiRequestError
from schemas.nurse import Nurse
from utils.api_client import NurseApiClient
from utils.constants import DELETE_ERROR, FETCH_ERROR, SAVE_ERROR
from utils.download import ExportFile, build_export
from utils.logger import logger


class NurseManager:
    """
    Everything the nurses page shows, and the actions that change it.

    Mutations follow the same sequence: send the request, wait until the
    success message has been shown for its full delay, then refetch the list.
    Failures only produce an error message; nothing is retried.
    """

    def __init__(self, client: Optional[NurseApiClient] = None, notifier: Optional[TransientNotifier] = None):
        self.client = client or NurseApiClient()
        self.notifier = notifier or TransientNotifier()
        self.store = RecordStore()
        self.sort = SortState()
        self.paging = PageState()
        self.form = FormController()
        self.pending_delete: Optional[Nurse] = None

    # --- list -------------------------------------------------------------

    async def refresh(self) -> bool:
        try:
            nurses = await asyncio.to_thread(self.client.list_nurses)
        except ApiRequestError as e:
            self.notifier.error(f"{FETCH_ERROR}: {e.detail}")
            return False

        self.store.replace(nurses)
        self.paging = clamp_page(self.paging, len(self.store))
        logger.info("Loaded %d nurses", len(self.store))
        return True

    def view(self) -> Page:
        ordered = sort_records(self.store.records, self.sort)
        paging = clamp_page(self.paging, len(ordered))
        return paginate(ordered, paging.page, paging.page_size)

    def sort_by(self, key: str):
        self.sort = toggle_sort(self.sort, key)
        self.paging = reset_page(self.paging)

    def go_to_page(self, page: int):
        self.paging = go_to_page(self.paging, page, len(self.store))

    def set_page_size(self, page_size: int):
        self.paging = set_page_size(self.paging, page_size, len(self.store))

    # --- add / edit -------------------------------------------------------

    async def submit_form(self) -> bool:
        try:
            submission = self.form.submit()
        except FORM_ERRORS as e:
            logger.warning("Form rejected: %s", e)
            self.notifier.error(str(e))
            return False

        draft = submission.draft
        try:
            if submission.is_update:
                await asyncio.to_thread(self.client.update_nurse, submission.target.id, draft)
                logger.info("Updated nurse %s", submission.target.id)
                await self.notifier.success("Nurse updated successfully!")
            else:
                await asyncio.to_thread(self.client.create_nurse, draft)
                logger.info("Added nurse %s", draft.name)
                await self.notifier.success("Nurse added successfully!")
        except ApiRequestError as e:
            self.notifier.error(e.user_message(SAVE_ERROR))
            return False

        await self.refresh()
        return True

    # --- delete -----------------------------------------------------------

    def request_delete(self, nurse: Nurse):
        self.pending_delete = nurse

    def cancel_delete(self):
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        nurse, self.pending_delete = self.pending_delete, None
        if nurse is None:
            return False

        try:
            await asyncio.to_thread(self.client.delete_nurse, nurse.id)
        except ApiRequestError as e:
            self.notifier.error(e.user_message(DELETE_ERROR))
            return False

        logger.info("Deleted nurse %s", nurse.id)
        await self.notifier.success("Nurse deleted successfully!")
        await self.refresh()
        return True

    # --- export -----------------------------------------------------------

    def export(self, fmt: str, today: Optional[date] = None) -> Optional[ExportFile]:
        return build_export(self.store.records, fmt, today)
