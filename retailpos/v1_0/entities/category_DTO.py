from dataclasses import dataclass

@dataclass(slots=True)
class CategoryDTO:
    id: int
    name: str
