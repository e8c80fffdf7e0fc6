from typing import Any, Optional

# Global event for stopping multiprocessing pools, shared across worker processes
_stop_event_worker = None


def init_worker(stop_event: Optional[Any]):
    """
    Initializer for the multiprocessing.Pool, setting a global stop event
    for that worker process. The event must be a multiprocessing.Event so it
    can be handed to the workers under every start method.
    """
    global _stop_event_worker
    _stop_event_worker = stop_event


def stop_requested() -> bool:
    """Whether the pool this worker belongs to has been asked to stop."""
    return _stop_event_worker is not None and _stop_event_worker.is_set()
