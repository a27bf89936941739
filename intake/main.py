import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from intake.client.example_data import SAMPLE_CHANNEL, SAMPLE_NOTES, SAMPLE_TRANSCRIPTS
from intake.client.factory import AgentClientFactory, AssetUploaderFactory
from intake.config.settings import Settings
from intake.ingestion.collection import FileCollection
from intake.ingestion.models import SelectedFile
from intake.ingestion.pipeline import FileIngestionPipeline
from intake.ingestion.text_reader import ACCEPTED_FILE_TYPES
from intake.logging.logger import Log
from intake.report.console import DocumentPrinter
from intake.report.text_export import render_document_text
from intake.submission.assembler import SubmissionAssembler
from intake.submission.exceptions import SubmissionBlockedError
from intake.submission.models import ChannelInput, InputMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intake-docs",
        description="Generate a project intake document from a Slack channel, "
        "meeting transcripts and notes.",
    )
    parser.add_argument("--channel", default="", help="Slack channel, e.g. #project-kickoff")
    parser.add_argument("--transcripts", help="Pasted meeting transcript text")
    parser.add_argument("--notes", help="Pasted meeting notes text")
    parser.add_argument(
        "--transcript-file",
        action="append",
        default=[],
        type=Path,
        help=f"Transcript file to upload ({ACCEPTED_FILE_TYPES}); repeatable",
    )
    parser.add_argument(
        "--notes-file",
        action="append",
        default=[],
        type=Path,
        help=f"Notes file to upload ({ACCEPTED_FILE_TYPES}); repeatable",
    )
    parser.add_argument("--output", type=Path, help="Write the document as markdown to this path")
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the sample project material and the offline example agent",
    )
    return parser


def _channel_input(label: str, pasted: str | None) -> ChannelInput:
    if pasted is None:
        return ChannelInput(files=FileCollection(label))
    return ChannelInput(files=FileCollection(label), mode=InputMode.PASTE, pasted_text=pasted)


def _log_collection(collection: FileCollection) -> None:
    for record in collection:
        Log.info(
            f"[{collection.label}] {record.display_name} "
            f"({record.size_label}) -- {record.status_label}"
        )


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """One session: ingest files, submit, show the document. Returns the exit code."""
    if args.sample:
        settings = settings.model_copy(
            update={"agent_provider": "example", "upload_provider": "example"}
        )
        args.channel = args.channel or SAMPLE_CHANNEL
        args.transcripts = args.transcripts if args.transcripts is not None else SAMPLE_TRANSCRIPTS
        args.notes = args.notes if args.notes is not None else SAMPLE_NOTES

    try:
        transcript_files = [SelectedFile.from_path(p) for p in args.transcript_file]
        note_files = [SelectedFile.from_path(p) for p in args.notes_file]
    except OSError as exc:
        Log.error(f"Cannot open input file: {exc}")
        return 2

    pipeline = FileIngestionPipeline(
        uploader=AssetUploaderFactory.create(settings),
        max_file_size_bytes=settings.max_file_size_bytes,
    )
    transcripts = _channel_input("transcripts", args.transcripts)
    notes = _channel_input("notes", args.notes)
    pipeline.accept(transcript_files, transcripts.files)
    pipeline.accept(note_files, notes.files)
    await pipeline.wait_idle()
    _log_collection(transcripts.files)
    _log_collection(notes.files)

    assembler = SubmissionAssembler(AgentClientFactory.create(settings), settings.agent_id)
    try:
        outcome = await assembler.submit(args.channel, transcripts, notes)
    except SubmissionBlockedError as exc:
        Log.error(f"Cannot generate document: {exc}")
        return 2
    except Exception as exc:
        Log.error(f"An unexpected error occurred: {exc}")
        return 1

    if outcome.document is None:
        Log.error(outcome.error or "Document generation failed")
        return 1
    if args.output is not None:
        args.output.write_text(render_document_text(outcome.document), encoding="utf-8")
        Log.info(f"Wrote intake document to {args.output}")
    else:
        DocumentPrinter().print(outcome.document)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point: parse args -> configure logging -> run one session."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    sys.exit(asyncio.run(run(args, settings)))


if __name__ == "__main__":
    main()
