"""Builds the agent request from the session inputs and resolves the reply."""

from collections.abc import Mapping
from typing import Any

from intake.client.base import BaseAgentClient
from intake.client.exceptions import AgentError
from intake.logging.logger import Log
from intake.resolution.resolver import ResponseResolver
from intake.submission.activity import ActivityFeed, LoggingActivityFeed
from intake.submission.exceptions import SubmissionBlockedError
from intake.submission.models import (
    INVOCATION_FAILURE_MESSAGE,
    PARSE_FAILURE_MESSAGE,
    ChannelInput,
    SubmissionOutcome,
    SubmissionRequest,
)

_MESSAGE_TEMPLATE = """Slack Channel: {channel}
Meeting Transcripts: {transcripts}
Raw Meeting Notes: {notes}
{attachments}

Please generate a comprehensive Project Intake Document from the above information."""


class SubmissionAssembler:
    """Combines channel name, pasted text and files into one agent call."""

    def __init__(
        self,
        agent_client: BaseAgentClient,
        agent_id: str,
        resolver: ResponseResolver | None = None,
        activity: ActivityFeed | None = None,
    ) -> None:
        self._agent_client = agent_client
        self._agent_id = agent_id
        self._resolver = resolver or ResponseResolver()
        self._activity: ActivityFeed = activity or LoggingActivityFeed()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def blocked_reason(
        self,
        channel: str,
        transcripts: ChannelInput,
        notes: ChannelInput,
    ) -> str | None:
        """Why a submission is not allowed right now, or None when it is."""
        if not channel.strip():
            return "Channel name is empty"
        if self._in_flight:
            return "A submission is already in progress"
        if transcripts.files.is_blocking or notes.files.is_blocking:
            return "Files are still uploading"
        return None

    def can_submit(self, channel: str, transcripts: ChannelInput, notes: ChannelInput) -> bool:
        return self.blocked_reason(channel, transcripts, notes) is None

    def build_request(
        self,
        channel: str,
        transcripts: ChannelInput,
        notes: ChannelInput,
    ) -> SubmissionRequest:
        attachment_lines = []
        if transcript_names := transcripts.file_names():
            attachment_lines.append(f"Uploaded transcript files: {', '.join(transcript_names)}")
        if note_names := notes.file_names():
            attachment_lines.append(f"Uploaded notes files: {', '.join(note_names)}")
        attachments = "\n".join(attachment_lines)

        message = _MESSAGE_TEMPLATE.format(
            channel=channel.strip(),
            transcripts=transcripts.combined_text() or "None provided",
            notes=notes.combined_text() or "None provided",
            attachments=f"\n{attachments}" if attachments else "",
        )
        asset_ids = list(
            dict.fromkeys(
                [*transcripts.files.ready_asset_ids(), *notes.files.ready_asset_ids()]
            )
        )
        return SubmissionRequest(message=message, asset_ids=asset_ids)

    async def submit(
        self,
        channel: str,
        transcripts: ChannelInput,
        notes: ChannelInput,
    ) -> SubmissionOutcome:
        """Invoke the agent once and resolve its reply.

        Raises:
            SubmissionBlockedError: if the channel is empty, a submission is
                in flight, or files are still uploading.
        """
        reason = self.blocked_reason(channel, transcripts, notes)
        if reason is not None:
            raise SubmissionBlockedError(reason)

        request = self.build_request(channel, transcripts, notes)
        self._in_flight = True
        self._activity.set_processing(True)
        Log.info(
            f"Submitting intake request for {channel.strip()} "
            f"with {len(request.asset_ids)} asset(s)"
        )
        try:
            reply = await self._agent_client.invoke(
                request.message,
                self._agent_id,
                assets=request.asset_ids or None,
            )
            return self._handle_reply(reply)
        except AgentError as exc:
            Log.error(f"Agent invocation failed: {exc}")
            return SubmissionOutcome(error=str(exc) or INVOCATION_FAILURE_MESSAGE)
        finally:
            self._in_flight = False
            self._activity.set_processing(False)

    def _handle_reply(self, reply: Any) -> SubmissionOutcome:
        if not isinstance(reply, Mapping):
            return SubmissionOutcome(error=INVOCATION_FAILURE_MESSAGE)

        session_id = reply.get("session_id")
        if not isinstance(session_id, str) or not session_id:
            session_id = None
        else:
            self._activity.attach(session_id)

        if not reply.get("success"):
            error = _invocation_error(reply)
            Log.error(f"Agent reported failure: {error}")
            return SubmissionOutcome(error=error, session_id=session_id)

        document = self._resolver.resolve(reply)
        if document is None:
            return SubmissionOutcome(
                error=PARSE_FAILURE_MESSAGE,
                parse_failed=True,
                session_id=session_id,
            )
        Log.info(f"Intake document resolved: {document.title or 'untitled'}")
        return SubmissionOutcome(document=document, session_id=session_id)


def _invocation_error(reply: Mapping[str, Any]) -> str:
    error = reply.get("error")
    if isinstance(error, str) and error:
        return error
    response = reply.get("response")
    if isinstance(response, Mapping):
        message = response.get("message")
        if isinstance(message, str) and message:
            return message
    return INVOCATION_FAILURE_MESSAGE
