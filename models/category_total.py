from dataclasses import dataclass


@dataclass
class CategoryTotal:
    category: str
    total: float = 0.0
