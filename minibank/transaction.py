"""Recorded money movements between accounts."""

from __future__ import annotations

import os
from dataclasses import dataclass

from minibank.account import format_amount


@dataclass
class Transaction:
    """A deposit, withdrawal or transfer. Account id 0 stands for cash."""

    from_id: int
    to_id: int
    amount: float
    timestamp: str
    kind: str

    def details(self) -> str:
        """Multi-line description of the transaction."""
        return "\n".join(
            [
                "Transaction Details:",
                f"From Account ID: {self.from_id}",
                f"To Account ID: {self.to_id}",
                f"Amount: ${format_amount(self.amount)}",
                f"Timestamp: {self.timestamp}",
                f"Type: {self.kind}",
            ]
        )

    def to_record(self) -> str:
        """Serialise as ``from,to,amount,timestamp,type`` without a newline."""
        return (
            f"{self.from_id},{self.to_id},{format_amount(self.amount)},"
            f"{self.timestamp},{self.kind}"
        )

    @classmethod
    def from_record(cls, line: str) -> Transaction:
        """Parse a record written by :meth:`to_record`."""
        fields = line.rstrip("\r\n").split(",")
        fields += [""] * (5 - len(fields))
        from_id, to_id, amount, timestamp, kind = fields[:5]
        return cls(int(from_id), int(to_id), float(amount), timestamp, kind)

    def append_to_file(self, path: str | os.PathLike[str]) -> None:
        """Append this transaction's record to ``path``."""
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(self.to_record() + "\n")