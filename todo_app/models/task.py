from dataclasses import dataclass, asdict


@dataclass
class Task:
    """A single entry in the to-do list."""
    id: int
    description: str

    def to_dict(self) -> dict:
        return asdict(self)
