"""Protocol-wide constants for the Arxia network."""

from typing import Final

# Vector clocks
MAX_VECTOR_CLOCK_ENTRIES: Final = 256
VC_PRUNING_AGE_DAYS: Final = 7

# Amounts: balances are counted in micro-ARX.
ONE_ARX: Final = 1_000_000
L0_CAP_MICRO_ARX: Final = 10 * ONE_ARX
L1_CAP_USD: Final = 50.0

# Wire format
COMPACT_BLOCK_SIZE: Final = 193
LORA_MTU: Final = 256

# Consensus thresholds, as fractions of supply or of representatives.
MIN_DELEGATION_FRACTION: Final = 0.001
QUORUM_FRACTION: Final = 2.0 / 3.0
MIN_STAKE_FRACTION: Final = 0.20

# Relay reputation: a success rate under the penalty threshold over the
# scoring window costs stake; under the exclusion threshold over a week the
# relay is dropped and loses a larger share.
RELAY_SCORING_WINDOW_DAYS: Final = 30
RELAY_PENALTY_THRESHOLD: Final = 0.85
RELAY_EXCLUSION_THRESHOLD: Final = 0.60