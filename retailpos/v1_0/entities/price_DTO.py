from dataclasses import dataclass

@dataclass(slots=True)
class RepriceResultDTO:
    message: str
    updated_count: int
