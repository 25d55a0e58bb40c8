"""
Cancellation Token

Passed into long-running reads (unread aggregation) so the owner can abort
them when it is torn down. Callers check `raise_if_cancelled()` between
backend round trips.
"""

# Python Packages
import threading

# Exceptions
from .exceptions import OperationCancelled





class CancellationToken:

    def __init__(self):
        self._event = threading.Event()


    def cancel(self):
        self._event.set()


    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


    def raise_if_cancelled(self):
        if self._event.is_set():
            raise OperationCancelled()
