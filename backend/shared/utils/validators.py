"""
Validation gate: named rule sets applied to transfer objects.

Each catalog entity owns one Validator holding a rule set per operation
("create", "update"). Validation is synchronous and never touches the
database; foreign keys are only checked for presence here.

Usage:
    validator = Validator("ProductCategory", {
        RuleSets.CREATE: title_rules(),
        RuleSets.UPDATE: [PositiveInt("id"), *title_rules()],
    })
    validator.validate(dto, RuleSets.CREATE)   # raises ValidationError
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pydantic.alias_generators import to_camel

from shared.config.constants import Limits
from shared.utils.exceptions import ValidationError

# Letters in any alphabet, single spaces allowed between words
LETTERS_ONLY = re.compile(r"^[^\W\d_]+(?: [^\W\d_]+)*$")


def _label(field: str) -> str:
    return to_camel(field)


# =============================================================================
# Rules
# =============================================================================


@dataclass(frozen=True)
class Rule(ABC):
    """A single predicate over one attribute of the validated object."""

    field: str

    @abstractmethod
    def check(self, value: Any) -> str | None:
        """Return an error message, or None when the value passes."""

    def __call__(self, instance: Any) -> str | None:
        return self.check(getattr(instance, self.field, None))


@dataclass(frozen=True)
class Required(Rule):
    def check(self, value: Any) -> str | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return f"'{_label(self.field)}' is required."
        return None


@dataclass(frozen=True)
class Length(Rule):
    min_length: int = Limits.TITLE_MIN_LENGTH
    max_length: int = Limits.TITLE_MAX_LENGTH

    def check(self, value: Any) -> str | None:
        if value is None:
            return None
        if not self.min_length <= len(value) <= self.max_length:
            return (
                f"'{_label(self.field)}' must be between {self.min_length} "
                f"and {self.max_length} characters."
            )
        return None


@dataclass(frozen=True)
class Pattern(Rule):
    pattern: re.Pattern = LETTERS_ONLY
    description: str = "only letters"

    def check(self, value: Any) -> str | None:
        if value is None:
            return None
        if not self.pattern.fullmatch(value):
            return f"'{_label(self.field)}' must contain {self.description}."
        return None


@dataclass(frozen=True)
class PositiveInt(Rule):
    """Identity or foreign key: present and greater than zero."""

    def check(self, value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return f"'{_label(self.field)}' must be a positive number."
        return None


@dataclass(frozen=True)
class MinValue(Rule):
    minimum: float = 0

    def check(self, value: Any) -> str | None:
        if value is None:
            return None
        if value < self.minimum:
            return f"'{_label(self.field)}' must be equal to or greater than {self.minimum:g}."
        return None


def title_rules(field: str = "title") -> list[Rule]:
    """Required, 1-30 characters, letters only."""
    return [Required(field), Length(field), Pattern(field)]


# =============================================================================
# Validator
# =============================================================================


class Validator:
    """Holds the named rule sets of one entity type."""

    def __init__(self, entity_name: str, rule_sets: Mapping[str, Sequence[Rule]]):
        self._entity_name = entity_name
        self._rule_sets = {name: tuple(rules) for name, rules in rule_sets.items()}

    @property
    def rule_set_names(self) -> list[str]:
        return list(self._rule_sets)

    def errors(self, instance: Any, rule_set: str) -> list[str]:
        """Run every rule of the set and collect the failures."""
        if rule_set not in self._rule_sets:
            raise KeyError(f"Unknown rule set '{rule_set}' for {self._entity_name}")

        if instance is None:
            return [f"{self._entity_name} can't be null."]

        failures = []
        for rule in self._rule_sets[rule_set]:
            message = rule(instance)
            if message is not None:
                failures.append(message)
        return failures

    def validate(self, instance: Any, rule_set: str) -> None:
        """
        Raise ValidationError when any rule of the named set fails.

        Raises:
            ValidationError: With every failure message of the set.
            KeyError: If the rule set is not registered (programming error).
        """
        failures = self.errors(instance, rule_set)
        if failures:
            raise ValidationError(
                " ".join(failures),
                errors=failures,
                entity_type=self._entity_name,
                rule_set=rule_set,
            )
