from collections.abc import Callable, Iterable, Iterator

from intake.ingestion.exceptions import RecordNotFoundError
from intake.ingestion.models import UploadedFileRecord, UploadStatus

CollectionListener = Callable[["FileCollection"], None]


class FileCollection:
    """Ordered records of one input channel (transcripts or notes).

    Every mutation builds a new tuple and installs it whole, so interleaved
    completions never clobber each other's entries.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self._records: tuple[UploadedFileRecord, ...] = ()
        self._listeners: list[CollectionListener] = []

    @property
    def records(self) -> tuple[UploadedFileRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UploadedFileRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> UploadedFileRecord:
        return self._records[index]

    @property
    def is_blocking(self) -> bool:
        """True while any record is still uploading."""
        return any(record.is_uploading for record in self._records)

    def ready_asset_ids(self) -> list[str]:
        return [
            record.remote_asset_id
            for record in self._records
            if record.status is UploadStatus.READY and record.remote_asset_id
        ]

    def subscribe(self, listener: CollectionListener) -> None:
        self._listeners.append(listener)

    def extend(self, records: Iterable[UploadedFileRecord]) -> None:
        self._install((*self._records, *records))

    def remove(self, index: int) -> UploadedFileRecord:
        """Drop the record at ``index``. In-flight work for it is not cancelled."""
        if not -len(self._records) <= index < len(self._records):
            raise RecordNotFoundError(
                f"No record at index {index} in {self.label} ({len(self._records)} records)"
            )
        removed = self._records[index]
        position = index % len(self._records)
        self._install(self._records[:position] + self._records[position + 1:])
        return removed

    def resolve(
        self,
        record_id: str,
        update: Callable[[UploadedFileRecord], UploadedFileRecord],
    ) -> bool:
        """Apply a completion to the newest still-uploading record with ``record_id``.

        Returns False when no such record remains (it was removed); the
        completion is then dropped.
        """
        for position in range(len(self._records) - 1, -1, -1):
            record = self._records[position]
            if record.record_id == record_id and record.is_uploading:
                updated = list(self._records)
                updated[position] = update(record)
                self._install(tuple(updated))
                return True
        return False

    def clear(self) -> None:
        self._install(())

    def _install(self, records: tuple[UploadedFileRecord, ...]) -> None:
        self._records = records
        for listener in self._listeners:
            listener(self)
