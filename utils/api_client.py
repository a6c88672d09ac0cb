import requests
from pydantic import ValidationError
from typing import Any, List, Optional, Union
from exceptions.custom_errors import ApiRequestError
from schemas.nurse import Nurse, NurseDraft
from utils.constants import API_BASE_URL, REQUEST_TIMEOUT
from utils.logger import logger


class NurseApiClient:
    """
    Thin client for the ``/nurses`` REST resource.

    Every failure (connection problem, non-2xx status) is raised as
    ApiRequestError carrying the server's ``message`` when the body has one.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def list_nurses(self) -> List[Nurse]:
        body = self._request("GET", "/nurses")
        rows = body.get("data") if isinstance(body, dict) else body
        if rows is None:
            return []
        if not isinstance(rows, list):
            logger.error("GET /nurses returned an unexpected body: %.200r", body)
            raise ApiRequestError(None, detail="Unexpected response from server")
        try:
            return [Nurse.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error("GET /nurses returned invalid records: %s", e)
            raise ApiRequestError(None, detail=f"Invalid nurse record from server ({e.error_count()} errors)") from e

    def create_nurse(self, draft: NurseDraft) -> Any:
        return self._request("POST", "/nurses", json=draft.payload())

    def update_nurse(self, nurse_id: Union[int, str], draft: NurseDraft) -> Any:
        return self._request("PUT", f"/nurses/{nurse_id}", json=draft.payload())

    def delete_nurse(self, nurse_id: Union[int, str]) -> Any:
        return self._request("DELETE", f"/nurses/{nurse_id}")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.info("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as e:
            message = _server_message(e.response)
            status = getattr(e.response, "status_code", None)
            logger.error("%s %s failed (%s): %s", method, url, status, message or e)
            raise ApiRequestError(message, status_code=status, detail=str(e)) from e
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiRequestError(None, detail=str(e)) from e

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text


def _server_message(resp: Optional[requests.Response]) -> Optional[str]:
    """ ``{"message": "..."}`` from an error body, if there is one. """
    if resp is None:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
