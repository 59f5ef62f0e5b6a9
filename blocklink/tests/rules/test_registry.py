'''Unit tests for the ordered rule registry'''

__author__ = 'BlockLink Developers'

import pytest

from blocklink.rules.base import LinkRule, PredicateRule
from blocklink.rules.registry import RuleRegistry, RuleEntry, MissingRuleError
from blocklink.rules.standard import ConstantRule, AcyclicRule


# registration tests
def test_registry_order() -> None:
    '''Test that rules are consulted in the order they were registered'''
    a, b, c = ConstantRule(name='a'), ConstantRule(name='b'), ConstantRule(name='c')
    registry = RuleRegistry([a, b, c])

    assert list(registry) == [a, b, c]

def test_registry_readd_moves_to_end() -> None:
    '''Test that re-registering a rule moves it to the end rather than duplicating it'''
    a, b, c = ConstantRule(name='a'), ConstantRule(name='b'), ConstantRule(name='c')
    registry = RuleRegistry([a, b, c])
    registry.add_rule(a)

    assert list(registry) == [b, c, a]

def test_registry_size_stable_under_readd() -> None:
    rule = ConstantRule()
    registry = RuleRegistry([rule, ConstantRule(False)])
    for _ in range(10):
        registry.add_rule(rule)

    assert len(registry) == 2

def test_registry_insert() -> None:
    a, b, c = ConstantRule(name='a'), ConstantRule(name='b'), ConstantRule(name='c')
    registry = RuleRegistry([a, b])
    registry.insert_rule(0, c)
    registry.insert_rule(1, b)

    assert list(registry) == [c, b, a]

def test_registry_rejects_non_rules() -> None:
    with pytest.raises(TypeError):
        RuleRegistry().add_rule(lambda *args: True)

# removal tests
def test_registry_remove() -> None:
    a, b = ConstantRule(name='a'), ConstantRule(name='b')
    registry = RuleRegistry([a, b])
    entry = registry.remove_rule(a)

    assert (entry.rule is a) and (list(registry) == [b]) and (a not in registry)

def test_registry_remove_absent() -> None:
    with pytest.raises(MissingRuleError):
        RuleRegistry().remove_rule(ConstantRule())

# entry tests
def test_entry_observer_handle() -> None:
    '''Test that only rules which react to workspace events carry an observer handle'''
    plain = ConstantRule()
    observing = AcyclicRule()
    registry = RuleRegistry()
    plain_entry, observing_entry = registry.add_rule(plain), registry.add_rule(observing)

    assert not plain_entry.observes_workspace
    assert observing_entry.listener is observing
    assert registry.entries == [plain_entry, observing_entry]

def test_entry_kept_on_readd() -> None:
    rule = AcyclicRule()
    registry = RuleRegistry()
    first = registry.add_rule(rule)
    second = registry.add_rule(rule)

    assert first is second

# rule base tests
def test_predicate_rule_named_after_callable() -> None:
    def types_must_match(block1, block2, connector1, connector2) -> bool:
        return connector1.data_type == connector2.data_type
    rule = PredicateRule(types_must_match, mandatory=True)

    assert (rule.name == 'types_must_match') and rule.is_mandatory

def test_predicate_rule_needs_callable() -> None:
    with pytest.raises(TypeError):
        _ = PredicateRule('not callable')

def test_link_rule_abstract() -> None:
    with pytest.raises(TypeError):
        _ = LinkRule()
