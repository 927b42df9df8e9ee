"""
Location: python/wallet_checkout/control.py

Summary:
    Exclusive in-flight guard standing in for a clickable button. A
    coordinator disables its control while a request is outstanding and
    re-enables it once any outcome has been handled.

Usage:
    Used by checkout.py and wallet.py.

Example:
    control = TriggerControl("google_pay_button")

    with control.hold():
        ...  # control.enabled is False here
"""

from contextlib import contextmanager
from typing import Iterator

from .provider import RequestInFlightError


class TriggerControl:
    """
    Enabled/visible flags for one user-facing trigger.

    The guard is advisory: it is checked and set synchronously, so on a
    single event loop a second request during the outstanding window is
    rejected. It is not a lock across threads.

    Attributes:
        name: Identifier used in error messages
        enabled: False while a request is outstanding
        visible: Whether the trigger is offered at all
    """

    def __init__(self, name: str, visible: bool = False):
        self.name = name
        self.enabled = True
        self.visible = visible

    def acquire(self) -> None:
        """
        Disable the control for a new request.

        Raises:
            RequestInFlightError: If a request is already outstanding
        """
        if not self.enabled:
            raise RequestInFlightError(f"{self.name}: a request is already in flight")
        self.enabled = False

    def release(self) -> None:
        """Re-enable the control."""
        self.enabled = True

    @contextmanager
    def hold(self) -> Iterator["TriggerControl"]:
        """Disable the control for the duration of the block, whatever its outcome."""
        self.acquire()
        try:
            yield self
        finally:
            self.release()

    def __repr__(self) -> str:
        return f"TriggerControl({self.name!r}, enabled={self.enabled}, visible={self.visible})"
