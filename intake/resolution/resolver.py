"""Resolves a loosely shaped agent reply into a CanonicalDocument.

The agent may return the document as an object, as JSON text, or as JSON
text nested inside another ``response`` field. Resolution runs an ordered
list of decode steps; each step either hands a candidate to the next one,
settles the result, or fails the whole resolution.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from intake.logging.logger import Log
from intake.resolution.builder import build_document
from intake.resolution.models import CanonicalDocument


class StepOutcome(str, Enum):
    CONTINUE = "continue"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    outcome: StepOutcome
    candidate: Any = None


DecodeStep = Callable[[Any, Any], StepResult]


class TextDecodeError(ValueError):
    """Raised when text does not hold a JSON value."""


def decode_text(raw: str) -> Any:
    """Decode JSON text, tolerating a surrounding markdown code fence."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    try:
        return json.loads(cleaned)
    except (ValueError, RecursionError) as exc:
        raise TextDecodeError(f"Invalid JSON text: {exc}") from exc


def _continue(candidate: Any) -> StepResult:
    return StepResult(StepOutcome.CONTINUE, candidate)


def take_result(candidate: Any, reply: Any) -> StepResult:
    """Start from ``reply.response.result``; None when it is missing."""
    response = reply.get("response") if isinstance(reply, Mapping) else None
    result = response.get("result") if isinstance(response, Mapping) else None
    return _continue(result)


def decode_result_text(candidate: Any, reply: Any) -> StepResult:
    """Decode a textual result. Undecodable text fails resolution outright."""
    if not isinstance(candidate, str):
        return _continue(candidate)
    try:
        return _continue(decode_text(candidate))
    except TextDecodeError as exc:
        Log.warning(f"Agent result is not valid JSON: {exc}")
        return StepResult(StepOutcome.FAILED)


def decode_nested_text(candidate: Any, reply: Any) -> StepResult:
    """Decode a textual ``response`` field inside the candidate, else keep the candidate."""
    if not isinstance(candidate, Mapping) or not isinstance(candidate.get("response"), str):
        return _continue(candidate)
    try:
        return _continue(decode_text(candidate["response"]))
    except TextDecodeError:
        Log.debug("Nested response text is not JSON, keeping outer object")
        return _continue(candidate)


def unwrap_nested_object(candidate: Any, reply: Any) -> StepResult:
    if isinstance(candidate, Mapping) and isinstance(candidate.get("response"), Mapping):
        return _continue(candidate["response"])
    return _continue(candidate)


def accept_candidate(candidate: Any, reply: Any) -> StepResult:
    if candidate is None:
        return _continue(None)
    return StepResult(StepOutcome.RESOLVED, candidate)


def decode_raw_response(candidate: Any, reply: Any) -> StepResult:
    """Last resort: decode the reply's ``raw_response`` text."""
    raw = reply.get("raw_response") if isinstance(reply, Mapping) else None
    if not isinstance(raw, str):
        return StepResult(StepOutcome.FAILED)
    Log.info("Falling back to raw agent response")
    try:
        decoded = decode_text(raw)
    except TextDecodeError:
        return StepResult(StepOutcome.FAILED)
    if decoded is None:
        return StepResult(StepOutcome.FAILED)
    return StepResult(StepOutcome.RESOLVED, decoded)


DEFAULT_STEPS: tuple[DecodeStep, ...] = (
    take_result,
    decode_result_text,
    decode_nested_text,
    unwrap_nested_object,
    accept_candidate,
    decode_raw_response,
)


class ResponseResolver:
    """Turns an agent reply into a CanonicalDocument, or None when nothing parses."""

    def __init__(self, steps: tuple[DecodeStep, ...] = DEFAULT_STEPS) -> None:
        self._steps = steps

    @property
    def steps(self) -> tuple[DecodeStep, ...]:
        return self._steps

    def resolve(self, reply: Any) -> CanonicalDocument | None:
        candidate: Any = None
        for step in self._steps:
            result = step(candidate, reply)
            if result.outcome is StepOutcome.FAILED:
                break
            if result.outcome is StepOutcome.RESOLVED:
                return build_document(result.candidate)
            candidate = result.candidate
        Log.warning("Could not parse agent response")
        return None
