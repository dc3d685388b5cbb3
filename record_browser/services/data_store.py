from __future__ import annotations

import enum
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable, Optional, Tuple

import requests

from record_browser.core.exceptions import LoadFailure
from record_browser.core.record import Record, parse_records

logger = logging.getLogger(__name__)


class LoadStatus(str, enum.Enum):
    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class DataStore:
    """
    Owns the shared record collection.

    The collection starts empty and is replaced wholesale by a single load
    from `data_url`. The store is the only writer; consumers get a reference
    to it instead of reaching for module-level state.

    Failures never propagate: they are logged, recorded in `status` /
    `last_error`, and the previous collection stays visible.
    """

    def __init__(
        self,
        data_url: Optional[str],
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.data_url = data_url
        self.timeout = timeout
        self._http = session if session is not None else requests

        self._lock = threading.Lock()
        self._collection: Tuple[Record, ...] = ()
        self._version = 0
        self._status = LoadStatus.NOT_LOADED
        self._last_error: Optional[str] = None
        # Future of the most recent load, whichever entry point started it
        self._future: Optional[Future] = None

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> DataStore:
        """Build a store that is already loaded (offline runs, tests)."""
        store = cls(data_url=None)
        store._collection = tuple(records)
        store._version = 1
        store._status = LoadStatus.LOADED

        done: Future = Future()
        done.set_result(True)
        store._future = done
        return store

    # -------------------------------------------------------------------------
    # Read-only snapshots
    # -------------------------------------------------------------------------
    @property
    def collection(self) -> Tuple[Record, ...]:
        return self._collection

    @property
    def version(self) -> int:
        """Incremented every time the collection is replaced."""
        return self._version

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def is_settled(self) -> bool:
        return self._status in (LoadStatus.LOADED, LoadStatus.FAILED)

    @property
    def last_error(self) -> Optional[str]:
        """Message of the most recent failed load, cleared by a successful one."""
        return self._last_error

    def snapshot(self) -> Tuple[int, Tuple[Record, ...], LoadStatus]:
        """Consistent (version, collection, status) triple."""
        with self._lock:
            return self._version, self._collection, self._status

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------
    def start_load(self) -> Future:
        """
        Kick off the one-shot load on a background worker.

        Only the first call submits work. Later calls return the Future of the
        load already started, including one started by a synchronous `load()`,
        so no second request is issued.
        """
        with self._lock:
            if self._future is not None:
                return self._future

            self._status = LoadStatus.LOADING
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="record-load")
            self._future = executor.submit(self._run_load)
            # The submitted load still runs; this only releases the worker afterwards.
            executor.shutdown(wait=False)
            return self._future

    def load(self) -> bool:
        """
        Run the load synchronously. Returns True if the collection was replaced.
        Refuses to start while another load is in flight.
        """
        with self._lock:
            if self._future is not None and not self._future.done():
                logger.warning(
                    "Record load already in flight; ignoring request",
                    extra={"data_url": self.data_url},
                )
                return False

            future: Future = Future()
            future.set_running_or_notify_cancel()
            self._future = future
            self._status = LoadStatus.LOADING

        ok = self._run_load()
        future.set_result(ok)
        return ok

    def _run_load(self) -> bool:
        logger.info("Loading records", extra={"data_url": self.data_url})
        try:
            records = self._fetch()
        except LoadFailure as e:
            self._mark_failed(str(e))
            logger.error(
                "Record load failed",
                extra={"data_url": self.data_url, "error": str(e)},
            )
            return False
        except Exception as e:
            self._mark_failed(f"Unexpected error: {e}")
            logger.exception(
                "Unexpected error while loading records",
                extra={"data_url": self.data_url},
            )
            return False

        with self._lock:
            self._collection = records
            self._version += 1
            version = self._version
            self._status = LoadStatus.LOADED
            self._last_error = None

        logger.info(
            "Records loaded",
            extra={"data_url": self.data_url, "n_records": len(records), "version": version},
        )
        return True

    def _mark_failed(self, message: str) -> None:
        with self._lock:
            self._status = LoadStatus.FAILED
            self._last_error = message

    def _fetch(self) -> Tuple[Record, ...]:
        if not self.data_url:
            raise LoadFailure("No data_url configured")

        try:
            response = self._http.get(self.data_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise LoadFailure(f"Request to {self.data_url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise LoadFailure(f"Response from {self.data_url} is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise LoadFailure(
                f"Expected a JSON array of records, got {type(payload).__name__}"
            )

        return parse_records(payload)
