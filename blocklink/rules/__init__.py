'''Rules deciding which connectors may join, and the registry which orders them'''

from .base import LinkRule, PredicateRule, LinkPredicate
from .registry import RuleRegistry, RuleEntry, MissingRuleError
from .standard import (
    ConstantRule,
    MatchingTypesRule,
    ComplementaryKindsRule,
    VacantSocketRule,
    AcyclicRule,
)
