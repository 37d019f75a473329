from pathlib import Path

import pytest

from health_insight.policy.models import CallerRole, PromptPolicy
from health_insight.policy.policies import PolicyTable, default_policy_table, select_policy
from health_insight.policy.prompt_loader import PromptLoadError, load_prompt


class TestDefaultPolicies:
    def test_user_gets_strict_policy(self) -> None:
        policy = select_policy(CallerRole.USER)
        assert policy.name == "strict"
        assert policy.sanitize

    @pytest.mark.parametrize("role", [CallerRole.HC, CallerRole.ADMIN])
    def test_privileged_roles_get_clinical_policy(self, role: CallerRole) -> None:
        policy = select_policy(role)
        assert policy.name == "clinical"
        assert not policy.sanitize

    def test_every_role_maps_to_exactly_one_policy(self) -> None:
        table = default_policy_table()
        for role in CallerRole:
            assert sum(p.applies_to(role) for p in table.policies) == 1

    def test_strict_instruction_fixes_bullet_grammar(self) -> None:
        instruction = select_policy(CallerRole.USER).system_instruction
        assert "• **Parameter Name**: [Value] - [Classification]" in instruction
        assert "BORDERLINE" in instruction

    def test_clinical_instruction_allows_clinical_notes(self) -> None:
        assert "Clinical note" in select_policy(CallerRole.HC).system_instruction


class TestPolicyTable:
    def _policy(self, name: str, *roles: CallerRole) -> PromptPolicy:
        return PromptPolicy(name=name, roles=frozenset(roles), system_instruction=name)

    def test_rejects_uncovered_roles(self) -> None:
        with pytest.raises(ValueError, match="ADMIN"):
            PolicyTable([self._policy("a", CallerRole.USER, CallerRole.HC)])

    def test_first_matching_policy_wins(self) -> None:
        table = PolicyTable([
            self._policy("first", CallerRole.USER),
            self._policy("rest", *CallerRole),
        ])
        assert table.select(CallerRole.USER).name == "first"
        assert table.select(CallerRole.ADMIN).name == "rest"

    def test_custom_table_is_used(self) -> None:
        table = PolicyTable([self._policy("only", *CallerRole)])
        assert select_policy(CallerRole.HC, table).name == "only"


class TestCallerRole:
    def test_parse_is_case_insensitive(self) -> None:
        assert CallerRole.parse(" hc ") is CallerRole.HC

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown caller role"):
            CallerRole.parse("doctor")


class TestPromptLoader:
    def test_loads_bundled_prompt(self) -> None:
        assert load_prompt("chat").startswith("You are Health Insight Agent")

    def test_missing_prompt_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PromptLoadError, match="missing"):
            load_prompt("missing", prompt_dir=tmp_path)
