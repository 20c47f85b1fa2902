# src/leerstand/services/drafting.py
from __future__ import annotations

import threading

from leerstand.adapters.logging_utils import get_logger, log_context
from leerstand.domain.campaign import CampaignDraftRequest, DraftState
from leerstand.domain.ports import CopyDraftClient

logger = get_logger(__name__)


class DraftInProgressError(RuntimeError):
    pass


class DraftSession:
    """
    idle -> requesting -> idle around a single CopyDraftClient call.

    A submit while a request is in flight is rejected, never queued, and the
    running request is not cancelled. The last finished draft stays in
    `result` until the next submit starts.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.state: DraftState = "idle"
        self.result: str = ""

    @property
    def busy(self) -> bool:
        return self.state == "requesting"

    def submit(self, request: CampaignDraftRequest, client: CopyDraftClient) -> str:
        if not self._lock.acquire(blocking=False):
            raise DraftInProgressError("A copy draft is already being generated")
        try:
            self.state = "requesting"
            self.result = ""
            logger.info("copy_draft_started", extra=log_context(project_type=request.project_type))
            text = client.submit(request)
            self.result = text
            return text
        finally:
            self.state = "idle"
            self._lock.release()


class DraftSessionRegistry:
    """
    One DraftSession per browser session id, held only while its request is
    in flight. An idle session carries no state worth keeping, so it is
    dropped as soon as submit returns.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, DraftSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> DraftSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = DraftSession()
                self._sessions[session_id] = session
            return session

    def submit(self, session_id: str, request: CampaignDraftRequest, client: CopyDraftClient) -> str:
        session = self.get(session_id)
        try:
            return session.submit(request, client)
        finally:
            with self._lock:
                if not session.busy and self._sessions.get(session_id) is session:
                    del self._sessions[session_id]

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)
