"""Asynchronous ingestion of user-selected files into a file collection."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from intake.client.base import BaseAssetUploader
from intake.ingestion.collection import FileCollection
from intake.ingestion.models import (
    DEFAULT_UPLOAD_ERROR,
    SelectedFile,
    UploadedFileRecord,
)
from intake.ingestion.text_reader import read_text_content
from intake.logging.logger import Log

MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

TextReader = Callable[[SelectedFile], Awaitable[str | None]]


class FileIngestionPipeline:
    """Extracts local text and registers remote assets for accepted files.

    Files of one batch are processed one at a time: the read and upload of a
    file start only after the previous file's upload has resolved.
    """

    def __init__(
        self,
        uploader: BaseAssetUploader,
        max_file_size_bytes: int = MAX_FILE_SIZE_BYTES,
        text_reader: TextReader = read_text_content,
    ) -> None:
        self._uploader = uploader
        self._max_file_size_bytes = max_file_size_bytes
        self._text_reader = text_reader
        self._tasks: set[asyncio.Task[None]] = set()

    def accept(
        self,
        files: Sequence[SelectedFile],
        collection: FileCollection,
    ) -> asyncio.Task[None] | None:
        """Create records for the batch right away and process it in the background.

        Oversized files are dropped without creating a record or reporting an
        error. Returns the background task, or None when nothing was accepted.
        """
        accepted = [f for f in files if f.size_bytes <= self._max_file_size_bytes]
        dropped = len(files) - len(accepted)
        if dropped:
            Log.debug(f"Dropped {dropped} oversized file(s) from {collection.label} batch")
        if not accepted:
            return None

        records = [UploadedFileRecord.create(f) for f in accepted]
        collection.extend(records)
        Log.info(f"Accepted {len(records)} file(s) into {collection.label}")

        task = asyncio.get_running_loop().create_task(
            self._process_batch(records, collection)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def ingest(self, files: Sequence[SelectedFile], collection: FileCollection) -> None:
        """Accept a batch and wait until every file in it has resolved."""
        task = self.accept(files, collection)
        if task is not None:
            await task

    async def wait_idle(self) -> None:
        while self._tasks:
            await asyncio.gather(*self._tasks)

    def remove(self, collection: FileCollection, index: int) -> None:
        removed = collection.remove(index)
        Log.debug(f"Removed {removed.display_name} from {collection.label}")

    async def _process_batch(
        self,
        records: list[UploadedFileRecord],
        collection: FileCollection,
    ) -> None:
        for record in records:
            await self._process_file(record, collection)

    async def _process_file(self, record: UploadedFileRecord, collection: FileCollection) -> None:
        try:
            text = await self._text_reader(record.source)
        except Exception as exc:
            Log.warning(f"Reading text of {record.display_name} failed: {exc}")
            text = None
        try:
            result = await self._uploader.upload(record.source)
        except Exception as exc:
            Log.warning(f"Upload of {record.display_name} failed: {exc}")
            self._complete(
                collection,
                record,
                lambda r: r.mark_failed(DEFAULT_UPLOAD_ERROR, text),
            )
            return

        asset_id = result.asset_ids[0] if result.asset_ids else ""
        if result.success and asset_id:
            Log.info(f"Uploaded {record.display_name} as asset {asset_id}")
            self._complete(collection, record, lambda r: r.mark_ready(asset_id, text))
        else:
            detail = result.error or DEFAULT_UPLOAD_ERROR
            Log.warning(f"Upload of {record.display_name} rejected: {detail}")
            self._complete(collection, record, lambda r: r.mark_failed(detail, text))

    @staticmethod
    def _complete(
        collection: FileCollection,
        record: UploadedFileRecord,
        update: Callable[[UploadedFileRecord], UploadedFileRecord],
    ) -> None:
        if not collection.resolve(record.record_id, update):
            Log.debug(f"Discarding completion for removed file {record.display_name}")
