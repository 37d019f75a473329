from health_insight.policy.models import CallerRole, PromptPolicy
from health_insight.policy.policies import PolicyTable, default_policy_table, select_policy

__all__ = [
    "CallerRole",
    "PolicyTable",
    "PromptPolicy",
    "default_policy_table",
    "select_policy",
]
