import pytest

from arxia.token_lock import TokenLock, TokenLockError


def test_token_lock_claim():
    lock = TokenLock("alice", 1_000_000, 1000)
    with pytest.raises(TokenLockError, match="lock period has not elapsed"):
        lock.claim(500)
    assert not lock.is_unlocked(500)
    assert lock.claim(1000) == 1_000_000
    assert lock.claimed


def test_token_lock_double_claim():
    lock = TokenLock("alice", 1_000_000, 1000)
    lock.claim(1000)
    with pytest.raises(TokenLockError, match="tokens already claimed"):
        lock.claim(2000)


def test_token_lock_is_unlocked_at_boundary():
    lock = TokenLock("alice", 1_000_000, 1000)
    assert lock.is_unlocked(1000)
    assert lock.is_unlocked(1001)
    assert not lock.is_unlocked(999)


def test_failed_claim_leaves_lock_unclaimed():
    lock = TokenLock("alice", 1_000_000, 1000)
    with pytest.raises(TokenLockError):
        lock.claim(10)
    assert lock.claimed is False