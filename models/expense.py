from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Expense:
    id: int
    amount: float
    category: str
    note: Optional[str] = None   # None = no note; never ""
