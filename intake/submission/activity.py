from typing import Protocol

from intake.logging.logger import Log


class ActivityFeed(Protocol):
    """Progress feed of the agent run, keyed by session id."""

    def set_processing(self, processing: bool) -> None: ...

    def attach(self, session_id: str) -> None: ...


class LoggingActivityFeed:
    """Activity feed that only records state changes in the log."""

    def __init__(self) -> None:
        self.processing = False
        self.session_id: str | None = None

    def set_processing(self, processing: bool) -> None:
        self.processing = processing
        Log.debug(f"Agent processing: {processing}")

    def attach(self, session_id: str) -> None:
        self.session_id = session_id
        Log.info(f"Agent session {session_id}")
