# value objects shared by the service, the board state and the cli

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass(frozen=True)
class DisplaySample:
    # one day of forecast, reduced to what the template renders
    icon: str
    description: str
    temperature: int
    day_label: str

    def as_dict(self) -> Dict[str, object]:
        # key names the template binds to
        return {
            "icon": self.icon,
            "description": self.description,
            "temp": self.temperature,
            "date": self.day_label,
        }

@dataclass(frozen=True)
class ParseResult:
    # success with zero samples means no noon entries, failure means a malformed payload
    samples: List[DisplaySample] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, samples: List[DisplaySample]) -> "ParseResult":
        return cls(samples=list(samples))

    @classmethod
    def failure(cls, message: str) -> "ParseResult":
        return cls(error=message)
