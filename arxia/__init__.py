"""Block lattice ledger, ORV consensus, CRDT reconciliation, gossip and mesh transport pieces."""

__version__ = "0.1.0"