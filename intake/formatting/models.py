import re
from dataclasses import dataclass

_EMPHASIS = re.compile(r"\*\*(.*?)\*\*")


@dataclass(frozen=True, slots=True)
class TextRun:
    """A span of inline text, optionally emphasized."""

    text: str
    emphasized: bool = False


def split_emphasis(text: str) -> tuple[TextRun, ...]:
    """Split ``**bold**`` spans out of a line in a single, non-recursive pass.

    Unmatched markers stay in the text. Text without any complete pair comes
    back as one plain run.
    """
    parts = _EMPHASIS.split(text)
    if len(parts) == 1:
        return (TextRun(text),)
    runs = [
        TextRun(part, emphasized=index % 2 == 1)
        for index, part in enumerate(parts)
    ]
    return tuple(run for run in runs if run.text)


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str

    @property
    def runs(self) -> tuple[TextRun, ...]:
        return split_emphasis(self.text)


@dataclass(frozen=True, slots=True)
class ListItem:
    ordered: bool
    text: str

    @property
    def runs(self) -> tuple[TextRun, ...]:
        return split_emphasis(self.text)


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str

    @property
    def runs(self) -> tuple[TextRun, ...]:
        return split_emphasis(self.text)


@dataclass(frozen=True, slots=True)
class Spacer:
    """Blank line between blocks."""


FormattedBlock = Heading | ListItem | Paragraph | Spacer
