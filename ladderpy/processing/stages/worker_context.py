"""Worker context for multiprocessing without global state."""

from dataclasses import dataclass
import threading


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for ladder search workers.

    Attributes:
        dictionary: Words the ladders may pass through
        strict: Whether to validate inputs before each search
    """

    dictionary: frozenset[str]
    strict: bool = False

    @classmethod
    def from_dict_data(cls, dict_data, config) -> "WorkerContext":
        """Create WorkerContext from DictionaryData and config."""
        return cls(dictionary=frozenset(dict_data.words), strict=config.strict)


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage."""
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
