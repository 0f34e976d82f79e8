# Error conditions reported by the piece queue
class QueueError(Exception):
    """Base exception for piece queue errors."""

    def __init__(self, message: str, capacity: int):
        super().__init__(message)
        self.capacity = capacity


class QueueFullError(QueueError):
    """Raised when enqueueing into a queue that is already at capacity."""

    def __init__(self, capacity: int):
        super().__init__(
            f"Queue is full ({capacity}/{capacity}); cannot enqueue", capacity
        )


class QueueEmptyError(QueueError):
    """Raised when dequeueing from a queue with no pieces."""

    def __init__(self, capacity: int):
        super().__init__(f"Queue is empty (0/{capacity}); cannot dequeue", capacity)
