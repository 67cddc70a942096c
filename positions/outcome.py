from dataclasses import dataclass
from enum import Enum
from typing import Any


class Outcome(Enum):
    PASS = "pass"
    FAIL = "fail"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class ValidationResult:
    outcome: Outcome
    reason: str = ""
    violations: tuple[str, ...] = ()
    document: Any = None

    @classmethod
    def passed(cls, document: Any = None, reason: str = "") -> "ValidationResult":
        return cls(Outcome.PASS, reason=reason, document=document)

    @classmethod
    def failed(cls, violations: list[str] | tuple[str, ...], document: Any = None) -> "ValidationResult":
        violations = tuple(violations)
        return cls(Outcome.FAIL, reason="; ".join(violations), violations=violations, document=document)

    @classmethod
    def inconclusive(cls, reason: str) -> "ValidationResult":
        return cls(Outcome.INCONCLUSIVE, reason=reason)

    @property
    def is_pass(self) -> bool:
        return self.outcome is Outcome.PASS
