from dataclasses import dataclass
from enum import Enum


class CallerRole(str, Enum):
    USER = "USER"
    HC = "HC"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: str) -> "CallerRole":
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(
                f"Unknown caller role '{value}'. Choose from: {[r.value for r in cls]}"
            ) from None


@dataclass(frozen=True)
class PromptPolicy:
    """System instruction set bound to the roles it governs.

    ``sanitize`` is False for policies whose replies are returned verbatim.
    """

    name: str
    roles: frozenset[CallerRole]
    system_instruction: str
    sanitize: bool = True

    def applies_to(self, role: CallerRole) -> bool:
        return role in self.roles
