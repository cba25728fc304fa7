import logging
import time
import uuid
from typing import Dict, Optional, Tuple

from planwizard.config import MAX_SESSIONS, SESSION_TTL_SECONDS
from planwizard.wizard.views import ViewRouter

logger = logging.getLogger(__name__)

SESSIONS: Dict[str, ViewRouter] = {}


def prune_sessions(now: Optional[float] = None) -> int:
    """
    Drop sessions idle for longer than SESSION_TTL_SECONDS, then the least
    recently used ones until there is room for one more under MAX_SESSIONS.
    """
    if now is None:
        now = time.monotonic()
    expired = [sid for sid, s in SESSIONS.items() if now - s.touched_at > SESSION_TTL_SECONDS]
    for sid in expired:
        del SESSIONS[sid]

    overflow = len(SESSIONS) - MAX_SESSIONS + 1
    if overflow > 0:
        oldest = sorted(SESSIONS, key=lambda sid: SESSIONS[sid].touched_at)[:overflow]
        for sid in oldest:
            del SESSIONS[sid]
        expired.extend(oldest)

    if expired:
        logger.info("Pruned %d wizard sessions", len(expired))
    return len(expired)


def create_session() -> Tuple[str, ViewRouter]:
    prune_sessions()
    sid = str(uuid.uuid4())
    SESSIONS[sid] = ViewRouter()
    return sid, SESSIONS[sid]


def get_session(session_id: str) -> Optional[ViewRouter]:
    session = SESSIONS.get(session_id)
    if session is not None:
        session.touched_at = time.monotonic()
    return session


def delete_session(session_id: str) -> None:
    if session_id in SESSIONS:
        del SESSIONS[session_id]
