import pytest

from arxia.escrow import Escrow, EscrowError, EscrowState


def _escrow() -> Escrow:
    return Escrow("alice", "bob", 1_000_000, 1000)


def test_escrow_release():
    escrow = _escrow()
    assert escrow.state is EscrowState.LOCKED
    escrow.release()
    assert escrow.state is EscrowState.RELEASED


def test_escrow_refund_after_timeout():
    escrow = _escrow()
    with pytest.raises(EscrowError, match="timeout has not elapsed"):
        escrow.refund(500)
    assert escrow.state is EscrowState.LOCKED
    escrow.refund(1000)
    assert escrow.state is EscrowState.REFUNDED


def test_escrow_double_release():
    escrow = _escrow()
    escrow.release()
    with pytest.raises(EscrowError, match="escrow is not in locked state"):
        escrow.release()


def test_escrow_refund_after_release_fails():
    escrow = _escrow()
    escrow.release()
    with pytest.raises(EscrowError, match="escrow is not in locked state"):
        escrow.refund(5000)
    assert escrow.state is EscrowState.RELEASED


def test_escrow_release_after_refund_fails():
    escrow = _escrow()
    escrow.refund(1000)
    with pytest.raises(EscrowError):
        escrow.release()
    assert escrow.state is EscrowState.REFUNDED