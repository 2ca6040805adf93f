from arxia.quorum import QuorumResult, check_quorum


def test_quorum_reached():
    assert check_quorum(7, 10, 250_000_000, 1_000_000_000).reached is True


def test_quorum_not_reached_reps():
    assert check_quorum(6, 10, 250_000_000, 1_000_000_000).reached is False


def test_quorum_not_reached_stake():
    assert check_quorum(7, 10, 100_000_000, 1_000_000_000).reached is False


def test_quorum_zero():
    assert check_quorum(0, 0, 0, 1_000_000_000).reached is False


def test_quorum_zero_supply():
    assert check_quorum(10, 10, 0, 0).reached is False


def test_quorum_exact_thresholds():
    assert check_quorum(2, 3, 20, 100).reached is True


def test_quorum_result_records_inputs():
    result = check_quorum(7, 10, 250_000_000, 1_000_000_000)
    assert result == QuorumResult(
        reached=True,
        voted_reps=7,
        total_reps=10,
        voted_stake=250_000_000,
        total_supply=1_000_000_000,
    )