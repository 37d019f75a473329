from collections.abc import Sequence
from functools import lru_cache

from health_insight.policy.models import CallerRole, PromptPolicy
from health_insight.policy.prompt_loader import load_prompt


class PolicyTable:
    """Ordered role -> policy mapping; the first policy covering a role wins."""

    def __init__(self, policies: Sequence[PromptPolicy]) -> None:
        uncovered = [
            role.value
            for role in CallerRole
            if not any(policy.applies_to(role) for policy in policies)
        ]
        if uncovered:
            raise ValueError(f"No prompt policy covers roles: {uncovered}")
        self._policies = tuple(policies)

    @property
    def policies(self) -> tuple[PromptPolicy, ...]:
        return self._policies

    def select(self, role: CallerRole) -> PromptPolicy:
        return next(policy for policy in self._policies if policy.applies_to(role))


@lru_cache(maxsize=1)
def default_policy_table() -> PolicyTable:
    return PolicyTable([
        PromptPolicy(
            name="strict",
            roles=frozenset({CallerRole.USER}),
            system_instruction=load_prompt("strict"),
            sanitize=True,
        ),
        PromptPolicy(
            name="clinical",
            roles=frozenset({CallerRole.HC, CallerRole.ADMIN}),
            system_instruction=load_prompt("clinical"),
            sanitize=False,
        ),
    ])


def select_policy(role: CallerRole, table: PolicyTable | None = None) -> PromptPolicy:
    """Return the prompt policy governing ``role`` (default table unless given)."""
    return (table or default_policy_table()).select(role)
