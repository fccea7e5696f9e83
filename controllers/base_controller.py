# -*- coding: utf-8 -*-
"""
Base Controller
===============
Common result type, background call plumbing and signals for controllers.

Remote calls never run on the GUI thread: each one is handed to a
RemoteCallWorker and its outcome comes back as `operation_finished`.
In-flight calls are neither deduplicated nor cancelled.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from PyQt5.QtCore import QObject, QThread, pyqtSignal

from services.exceptions import RemoteError, ValidationException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: List[str] = None,
        error: Optional[Exception] = None
    ) -> 'OperationResult[T]':
        """Create a failed result, keeping the exception for the UI error handler."""
        return cls(success=False, message=message, errors=errors or [], error=error)


class RemoteCallWorker(QThread):
    """Background worker for one blocking API call."""

    succeeded = pyqtSignal(str, object, object)  # operation, tag, data
    failed = pyqtSignal(str, object, object)  # operation, tag, exception

    def __init__(self, operation: str, call: Callable, args: tuple = (), tag: Any = None, parent=None):
        super().__init__(parent)
        self.operation = operation
        self.call = call
        self.args = args
        self.tag = tag

    def run(self):
        """Run the call in background."""
        try:
            data = self.call(*self.args)
        except Exception as e:
            self.failed.emit(self.operation, self.tag, e)
            return
        self.succeeded.emit(self.operation, self.tag, data)


class BaseController(QObject):
    """
    Base controller class.

    Subclasses start calls with `_run_remote()`, list per operation the error
    context and message key in FAILURES, and apply outcomes in
    `_handle_success()` / `_handle_failure()`.
    """

    # operation -> (error context, message key)
    FAILURES: Dict[str, Tuple[str, str]] = {}

    operation_finished = pyqtSignal(str, object)  # operation name, OperationResult
    loading_changed = pyqtSignal(bool)

    def __init__(self, api_client=None, parent=None):
        super().__init__(parent)
        self._api = api_client
        self._pending = 0
        self._workers: List[RemoteCallWorker] = []

    @property
    def api(self):
        """API client, resolved lazily so tests can inject a fake."""
        if self._api is None:
            from services.api_client import get_api_client
            self._api = get_api_client()
        return self._api

    # =========================================================================
    # Background calls
    # =========================================================================

    def _run_remote(self, operation: str, call: Callable, *args, tag: Any = None):
        """Start `call(*args)` on a worker thread."""
        logger.info(f"{self.__class__.__name__}.{operation} started")
        worker = RemoteCallWorker(operation, call, args, tag, parent=self)
        worker.succeeded.connect(self._on_remote_succeeded)
        worker.failed.connect(self._on_remote_failed)
        worker.finished.connect(self._prune_workers)
        self._workers.append(worker)
        self._set_pending(self._pending + 1)
        worker.start()

    def _on_remote_succeeded(self, operation: str, tag: Any, data: Any):
        self._set_pending(self._pending - 1)
        if not self._is_current(operation, tag):
            logger.debug(f"{self.__class__.__name__}.{operation}: stale result for {tag} dropped")
            return
        self.operation_finished.emit(operation, self._handle_success(operation, tag, data))

    def _on_remote_failed(self, operation: str, tag: Any, error: Exception):
        self._set_pending(self._pending - 1)
        if not self._is_current(operation, tag):
            logger.debug(f"{self.__class__.__name__}.{operation}: stale failure for {tag} dropped")
            return

        context, message_key = self.FAILURES[operation]
        if isinstance(error, RemoteError) and not error.context:
            error.context = context
        logger.warning(f"{self.__class__.__name__}.{operation} failed: {error}")

        self._handle_failure(operation, tag, error)
        self.operation_finished.emit(
            operation,
            OperationResult.fail(tr(message_key), errors=[str(error)], error=error)
        )

    def _reject(self, operation: str, message: str, field: str) -> OperationResult:
        """Report a local validation failure; no remote call is made."""
        context, _message_key = self.FAILURES[operation]
        result = OperationResult.fail(
            message,
            error=ValidationException(message, field=field, context=context)
        )
        self.operation_finished.emit(operation, result)
        return result

    def _set_pending(self, pending: int):
        was_loading = self._pending > 0
        self._pending = pending
        if was_loading != (pending > 0):
            self.loading_changed.emit(pending > 0)

    def _prune_workers(self):
        for worker in [w for w in self._workers if w.isFinished()]:
            self._workers.remove(worker)
            worker.deleteLater()

    def wait_for_workers(self):
        """Block until every running call has returned (used on shutdown)."""
        for worker in list(self._workers):
            worker.wait()

    # =========================================================================
    # Hooks
    # =========================================================================

    def _is_current(self, operation: str, tag: Any) -> bool:
        """Whether a finished call still applies to the current state."""
        return True

    def _handle_success(self, operation: str, tag: Any, data: Any) -> OperationResult:
        raise NotImplementedError

    def _handle_failure(self, operation: str, tag: Any, error: Exception):
        """State changes after a failed call. Nothing by default."""
