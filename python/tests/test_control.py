"""
Tests for wallet_checkout.control module.
"""

import pytest

from wallet_checkout.control import TriggerControl
from wallet_checkout.provider import CheckoutError, RequestInFlightError


class TestTriggerControl:
    """Tests for TriggerControl."""

    def test_initial_state(self):
        control = TriggerControl("button")
        assert control.enabled is True
        assert control.visible is False

    def test_acquire_disables(self):
        control = TriggerControl("button")
        control.acquire()
        assert control.enabled is False

    def test_second_acquire_rejected(self):
        control = TriggerControl("button")
        control.acquire()

        with pytest.raises(RequestInFlightError, match="button"):
            control.acquire()

    def test_in_flight_error_is_checkout_error(self):
        assert issubclass(RequestInFlightError, CheckoutError)

    def test_release_is_idempotent(self):
        control = TriggerControl("button")
        control.release()
        control.release()
        assert control.enabled is True

    def test_hold_disables_inside_block(self):
        control = TriggerControl("button")

        with control.hold():
            assert control.enabled is False

        assert control.enabled is True

    def test_hold_reenables_on_exception(self):
        control = TriggerControl("button")

        with pytest.raises(ValueError):
            with control.hold():
                raise ValueError("failed")

        assert control.enabled is True

    def test_rejected_hold_leaves_state(self):
        control = TriggerControl("button")
        control.acquire()

        with pytest.raises(RequestInFlightError):
            with control.hold():
                pass

        assert control.enabled is False
