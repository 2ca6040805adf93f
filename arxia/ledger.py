"""Global index of all account chains."""

from __future__ import annotations

from dataclasses import dataclass, field

from arxia.block import Block


@dataclass
class Ledger:
    """Maps each account's hex public key to its list of blocks."""

    chains: dict[str, list[Block]] = field(default_factory=dict)

    def add_block(self, block: Block) -> None:
        """Append a block to its account's chain."""
        self.chains.setdefault(block.account, []).append(block)

    def get_chain(self, account: str) -> list[Block] | None:
        """The chain of ``account``, or None if it is unknown."""
        return self.chains.get(account)