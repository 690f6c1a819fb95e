import itertools

import pytest
from fsalgebra.automata import fsa
from fsalgebra.automata.fsa import (
    DFA,
    EPSILON,
    NFA,
    AutomatonError,
    InvalidState,
    InvalidSymbol,
    MalformedAutomaton,
    MalformedDFA,
    MalformedNFA,
    renumber_dfa,
)
from loguru import logger


def strings(alphabet, maxlen=5):
    for n in range(maxlen + 1):
        for combo in itertools.product(alphabet, repeat=n):
            yield "".join(combo)


def contains_a():
    # Strings with at least one "a"
    return DFA(
        "ab",
        {"s0": {"a": "s1", "b": "s0"}, "s1": {"a": "s1", "b": "s1"}},
        "s0",
        {"s1"},
    )


def redundant_contains_a():
    # Same language, with s1 and s2 equivalent
    return DFA(
        "ab",
        {
            "s0": {"a": "s1", "b": "s0"},
            "s1": {"a": "s2", "b": "s1"},
            "s2": {"a": "s1", "b": "s2"},
        },
        "s0",
        {"s1", "s2"},
    )


def ends_with_ab():
    return NFA(
        "ab",
        {0: {"a": {0, 1}, "b": {0}}, 1: {"b": {2}}, 2: {}},
        {0},
        {2},
    )


def star_a_then_b():
    # a*b, with an epsilon transition
    return NFA(
        "ab",
        {0: {"a": {0}, EPSILON: {1}}, 1: {"b": {2}}, 2: {}},
        {0},
        {2},
    )


def both_letters(alphabet="ab"):
    # Strings containing both "a" and "b"
    return DFA(
        alphabet,
        {
            0: {"a": "A", "b": "B"},
            "A": {"a": "A", "b": "F"},
            "B": {"a": "F", "b": "B"},
            "F": {"a": "F", "b": "F"},
        },
        0,
        {"F"},
    )


def empty_language():
    return DFA("ab", {0: {"a": 1, "b": 0}, 1: {"a": 1, "b": 0}}, 0, ())


def all_automata():
    return [
        contains_a(),
        redundant_contains_a(),
        ends_with_ab(),
        star_a_then_b(),
        both_letters(),
        empty_language(),
    ]


# Scenarios


def test_dfa_process():
    dfa = contains_a()
    assert dfa.process("bba")
    assert not dfa.process("bbb")
    assert not dfa.process("")
    assert dfa.accept("a")


def test_dfa_find_passing():
    assert contains_a().find_passing() == "a"


def test_nfa_ends_with_ab():
    nfa = ends_with_ab()
    assert nfa.to_dfa().process("aab")
    assert not nfa.process("aba")
    assert nfa.process("ab")
    assert not nfa.process("")


def test_minimize_collapses_equivalent_states():
    dfa = redundant_contains_a()
    small = dfa.minimized()
    assert len(small.states) < len(dfa.states)
    assert len(small) == 2
    assert small.is_minimized
    assert not dfa.is_minimized


def test_reversed_scenario():
    rev = contains_a().to_nfa().reversed()
    assert rev.process("abb")


# DFA


def test_without_unreachables():
    dfa = DFA(
        "ab",
        {
            "s0": {"a": "s1", "b": "s0"},
            "s1": {"a": "s1", "b": "s1"},
            "u": {"a": "s0", "b": "u"},
        },
        "s0",
        {"s1", "u"},
    )
    pruned = dfa.without_unreachables()
    assert pruned == contains_a()
    assert "u" in dfa.states
    for s in strings("ab"):
        assert pruned.process(s) == dfa.process(s)


def test_without_unreachables_single_state():
    dfa = DFA("ab", {0: {"a": 0, "b": 0}, 1: {"a": 0, "b": 1}}, 0, {0, 1})
    pruned = dfa.without_unreachables()
    assert pruned.states == frozenset([0])
    assert pruned.final_states == frozenset([0])


def test_reachable_from():
    dfa = both_letters()
    assert dfa.reachable_from("A") == {"A", "F"}
    assert dfa.reachable_from(0, inclusive=False) == {"A", "B", "F"}
    assert dfa.reachable_from("F", inclusive=False) == {"F"}
    with pytest.raises(InvalidState):
        dfa.reachable_from("nope")


def test_find_passing_tie_break():
    assert both_letters("ab").find_passing() == "ab"
    assert both_letters("ba").find_passing() == "ba"


def test_find_passing_empty_string():
    dfa = DFA("ab", {0: {"a": 1, "b": 1}, 1: {"a": 1, "b": 1}}, 0, {0})
    assert dfa.find_passing() == ""


def test_find_passing_none():
    dfa = empty_language()
    assert dfa.find_passing() is None
    assert dfa.is_empty()
    assert not contains_a().is_empty()


def test_find_passing_unreachable_final():
    dfa = DFA("ab", {0: {"a": 0, "b": 0}, 1: {"a": 1, "b": 1}}, 0, {1})
    assert dfa.find_passing() is None


def test_find_passing_token_alphabet():
    dfa = DFA(
        ["if", "then"],
        {
            0: {"if": 1, "then": 2},
            1: {"if": 2, "then": 3},
            2: {"if": 2, "then": 2},
            3: {"if": 2, "then": 2},
        },
        0,
        {3},
    )
    assert dfa.find_passing() == ("if", "then")
    assert dfa.process(["if", "then"])
    assert not dfa.process(("then",))


def test_find_passing_is_shortest():
    for automaton in all_automata():
        dfa = automaton.to_dfa()
        accepted = [s for s in strings("ab") if dfa.process(s)]
        found = dfa.find_passing()
        if not accepted:
            assert found is None
        else:
            assert dfa.process(found)
            assert len(found) == min(len(s) for s in accepted)


def test_to_nfa():
    dfa = contains_a()
    nfa = dfa.to_nfa()
    assert nfa.states == dfa.states
    assert nfa.initial_states == frozenset(["s0"])
    assert nfa.transitions["s0"]["a"] == frozenset(["s1"])
    for s in strings("ab"):
        assert nfa.process(s) == dfa.process(s)


def test_dfa_to_dfa_is_self():
    dfa = contains_a()
    assert dfa.to_dfa() is dfa


def test_next_state():
    dfa = contains_a()
    assert dfa.next_state("s0", "a") == "s1"
    assert dfa.start() == "s0"
    assert dfa.is_final("s1")
    with pytest.raises(InvalidSymbol):
        dfa.next_state("s0", "c")
    with pytest.raises(fsa.UndefinedTransition):
        dfa.next_state("missing", "a")


def test_renumber_dfa():
    small = renumber_dfa(redundant_contains_a().minimized(), base=1)
    assert small.states == frozenset([1, 2])
    assert small.initial == 1
    assert small.final_states == frozenset([2])
    assert small.is_minimized
    assert small.process("ba")


# NFA


def test_epsilon_closure():
    nfa = star_a_then_b()
    assert nfa.epsilon_closure({0}) == frozenset([0, 1])
    assert nfa.epsilon_closure([1]) == frozenset([1])
    assert nfa.epsilon_closure(()) == frozenset()
    assert nfa.start() == frozenset([0, 1])


def test_epsilon_closure_chain_and_cycle():
    nfa = NFA(
        "a",
        {0: {EPSILON: {1}}, 1: {EPSILON: {2}}, 2: {EPSILON: {0}}, 3: {"a": {0}}},
        {3},
        {2},
    )
    assert nfa.epsilon_closure({0}) == frozenset([0, 1, 2])
    assert nfa.epsilon_closure({3}) == frozenset([3])
    assert nfa.process("a")
    assert not nfa.process("")


def test_epsilon_closure_idempotent():
    for automaton in all_automata():
        nfa = automaton if isinstance(automaton, NFA) else automaton.to_nfa()
        for r in range(len(nfa.states) + 1):
            for subset in itertools.combinations(nfa.sorted_states, r):
                closure = nfa.epsilon_closure(subset)
                assert nfa.epsilon_closure(closure) == closure


def test_epsilon_closure_unknown_state():
    with pytest.raises(InvalidState) as excinfo:
        star_a_then_b().epsilon_closure({0, 9})
    assert excinfo.value.states == frozenset([9])


def test_step():
    nfa = star_a_then_b()
    start = nfa.start()
    assert nfa.step(start, "a") == frozenset([0, 1])
    assert nfa.step(start, "b") == frozenset([2])
    assert nfa.step(frozenset([2]), "a") == frozenset()
    assert nfa.next_state(start, "b") == frozenset([2])


def test_step_invalid_symbol():
    nfa = star_a_then_b()
    with pytest.raises(InvalidSymbol):
        nfa.step(nfa.start(), EPSILON)
    with pytest.raises(InvalidSymbol) as excinfo:
        nfa.step(nfa.start(), "c")
    assert excinfo.value.symbol == "c"
    with pytest.raises(InvalidState):
        nfa.step({"x"}, "a")


def test_nfa_process_epsilon():
    nfa = star_a_then_b()
    assert nfa.process("aab")
    assert nfa.process("b")
    assert not nfa.process("ba")
    assert not nfa.process("")


def test_nfa_multiple_initial_states():
    nfa = NFA("ab", {0: {"a": {0}}, 1: {"b": {1}}}, {0, 1}, {0, 1})
    assert nfa.process("")
    assert nfa.process("aaa")
    assert nfa.process("bb")
    assert not nfa.process("ab")


def test_name_of():
    nfa = NFA("a", {"q0": {}, "q1": {}, "q2": {}}, {"q0"}, ())
    assert nfa.name_of({"q2", "q0"}) == "0 2"
    assert nfa.name_of(["q0", "q2", "q0"]) == "0 2"
    assert nfa.name_of(set()) == ""
    with pytest.raises(InvalidState):
        nfa.name_of({"q3"})


def test_to_dfa_is_total():
    nfa = NFA("ab", {0: {"a": {1}}, 1: {}}, {0}, {1})
    dfa = nfa.to_dfa()
    assert dfa.states == frozenset(["0", "1", ""])
    assert dfa.initial == "0"
    assert dfa.final_states == frozenset(["1"])
    assert dfa.transitions["1"]["a"] == ""
    assert dfa.transitions[""]["b"] == ""
    for trans in dfa.transitions.values():
        assert set(trans) == {"a", "b"}


def test_to_dfa_names_are_canonical():
    nfa = ends_with_ab()
    dfa = nfa.to_dfa()
    assert dfa.initial == nfa.name_of(nfa.start())
    assert dfa.transitions["0"]["a"] == "0 1"
    assert dfa.transitions["0 1"]["b"] == "0 2"


def test_to_dfa_no_initial_states():
    nfa = NFA("ab", {0: {"a": {0}}}, (), {0})
    dfa = nfa.to_dfa()
    assert dfa.states == frozenset([""])
    assert dfa.is_empty()


def test_membership_consistency():
    for automaton in all_automata():
        nfa = automaton if isinstance(automaton, NFA) else automaton.to_nfa()
        dfa = nfa.to_dfa()
        for s in strings("ab"):
            assert nfa.process(s) == dfa.process(s)


def test_reversed():
    nfa = star_a_then_b()
    rev = nfa.reversed()
    assert rev.initial_states == nfa.final_states
    assert rev.final_states == nfa.initial_states
    assert rev.states == nfa.states
    assert rev.transitions[1][EPSILON] == frozenset([0])
    assert rev.process("baa")
    assert not rev.process("aab")


def test_reversed_language():
    for automaton in all_automata():
        nfa = automaton if isinstance(automaton, NFA) else automaton.to_nfa()
        rev = nfa.reversed()
        for s in strings("ab"):
            assert nfa.process(s) == rev.process(s[::-1])


def test_reversed_twice():
    nfa = ends_with_ab()
    assert nfa.reversed().reversed() == nfa


def test_nfa_minimized():
    small = ends_with_ab().minimized()
    assert isinstance(small, DFA)
    assert small.is_minimized
    assert len(small) == 3


# Minimization


def test_minimized_preserves_language():
    for automaton in all_automata():
        small = automaton.minimized()
        for s in strings("ab"):
            assert automaton.process(s) == small.process(s)


def test_minimized_idempotent():
    for automaton in all_automata():
        small = automaton.minimized()
        assert len(small.minimized()) == len(small)


def test_minimized_sizes():
    assert len(contains_a().minimized()) == 2
    assert len(both_letters().minimized()) == 4
    assert len(empty_language().minimized()) == 1


def test_minimized_equal_for_equal_languages():
    a = renumber_dfa(contains_a().minimized())
    b = renumber_dfa(redundant_contains_a().minimized())
    assert a == b


# Purity


def test_operations_are_pure():
    dfa = redundant_contains_a()
    copy = redundant_contains_a()
    assert dfa.minimized() == dfa.minimized()
    assert dfa.without_unreachables() == dfa.without_unreachables()
    assert dfa.find_passing() == dfa.find_passing()
    assert dfa == copy

    nfa = ends_with_ab()
    ncopy = ends_with_ab()
    assert nfa.to_dfa() == nfa.to_dfa()
    assert nfa.reversed() == nfa.reversed()
    nfa.epsilon_closure({0})
    nfa.step({0}, "a")
    assert nfa == ncopy


def test_immutable_tables():
    dfa = contains_a()
    with pytest.raises(TypeError):
        dfa.transitions["s0"]["a"] = "s0"
    with pytest.raises(TypeError):
        dfa.transitions["x"] = {}
    nfa = ends_with_ab()
    with pytest.raises(AttributeError):
        nfa.transitions[0]["a"].add(2)


def test_attributes_are_read_only():
    dfa = DFA("a", {0: {"a": 0}, 1: {"a": 1}}, 0, {0})
    hash(dfa)
    with pytest.raises(AttributeError):
        dfa.initial = 1
    with pytest.raises(AttributeError):
        dfa.final_states = frozenset([1])
    with pytest.raises(AttributeError):
        dfa.is_minimized = True
    with pytest.raises(AttributeError):
        del dfa.states
    assert dfa.initial == 0
    assert dfa == DFA("a", {0: {"a": 0}, 1: {"a": 1}}, 0, {0})
    assert dfa != DFA("a", {0: {"a": 0}, 1: {"a": 1}}, 1, {0})

    nfa = ends_with_ab()
    with pytest.raises(AttributeError):
        nfa.initial_states = frozenset([1])
    with pytest.raises(AttributeError):
        nfa.alphabet = ("a",)
    assert nfa == ends_with_ab()


def test_input_tables_are_copied():
    table = {"s0": {"a": "s1", "b": "s0"}, "s1": {"a": "s1", "b": "s1"}}
    dfa = DFA("ab", table, "s0", {"s1"})
    table["s0"]["a"] = "s0"
    assert dfa.process("a")


def test_alphabet_is_shared():
    dfa = contains_a()
    assert dfa.alphabet == ("a", "b")
    assert dfa.minimized().alphabet is dfa.alphabet
    assert dfa.to_nfa().reversed().alphabet is dfa.alphabet


def test_alphabet_deduplicated():
    dfa = DFA("abba", {0: {"a": 0, "b": 0}}, 0, ())
    assert dfa.alphabet == ("a", "b")


def test_equality_and_hash():
    assert contains_a() == contains_a()
    assert hash(contains_a()) == hash(contains_a())
    assert contains_a() != redundant_contains_a()
    assert contains_a() != contains_a().to_nfa()
    flagged = DFA(
        "ab",
        contains_a().transitions,
        "s0",
        {"s1"},
        minimized=True,
    )
    assert flagged == contains_a()


def test_repr():
    assert repr(contains_a()) == "<DFA states=2 alphabet=2 final=1>"
    assert repr(ends_with_ab()) == "<NFA states=3 alphabet=2 initial=1 final=1>"


# Errors


def test_process_invalid_symbol():
    with pytest.raises(InvalidSymbol) as excinfo:
        contains_a().process("abc")
    assert excinfo.value.symbol == "c"
    with pytest.raises(InvalidSymbol):
        ends_with_ab().process("abc")


def test_error_hierarchy():
    assert issubclass(MalformedDFA, MalformedAutomaton)
    assert issubclass(MalformedNFA, MalformedAutomaton)
    assert issubclass(MalformedAutomaton, AutomatonError)
    assert issubclass(InvalidSymbol, AutomatonError)
    assert issubclass(InvalidState, AutomatonError)
    assert issubclass(fsa.UndefinedTransition, AutomatonError)


def test_malformed_dfa_not_total():
    with pytest.raises(MalformedDFA):
        DFA("ab", {0: {"a": 0}}, 0, ())


def test_malformed_dfa_extra_symbol():
    with pytest.raises(MalformedDFA):
        DFA("a", {0: {"a": 0, "b": 0}}, 0, ())


def test_malformed_dfa_undeclared_states():
    with pytest.raises(MalformedDFA):
        DFA("a", {0: {"a": 1}}, 0, ())
    with pytest.raises(MalformedDFA):
        DFA("a", {0: {"a": 0}}, 1, ())
    with pytest.raises(MalformedDFA):
        DFA("a", {0: {"a": 0}}, 0, {1})
    with pytest.raises(MalformedDFA):
        DFA("a", {}, 0, ())


def test_malformed_epsilon_in_alphabet():
    with pytest.raises(MalformedDFA):
        DFA(["a", EPSILON], {0: {"a": 0, EPSILON: 0}}, 0, ())
    with pytest.raises(MalformedNFA):
        NFA(["a", EPSILON], {0: {}}, {0}, ())


def test_malformed_nfa():
    with pytest.raises(MalformedNFA):
        NFA("a", {0: {"b": {0}}}, {0}, ())
    with pytest.raises(MalformedNFA):
        NFA("a", {0: {"a": {1}}}, {0}, ())
    with pytest.raises(MalformedNFA):
        NFA("a", {0: {}}, {1}, ())
    with pytest.raises(MalformedNFA):
        NFA("a", {0: {}}, {0}, {0, 1})


def test_malformed_nfa_string_destination():
    with pytest.raises(MalformedNFA):
        NFA("a", {"p": {"a": "pq"}, "q": {}}, {"p"}, ())
    nfa = NFA("a", {"p": {"a": ("p", "q")}, "q": {}}, {"p"}, ())
    assert nfa.transitions["p"]["a"] == frozenset(["p", "q"])


def test_nfa_partial_table():
    nfa = NFA("ab", {0: {"a": set()}, 1: {}}, {0}, {1})
    assert nfa.transitions[0] == {}
    assert not nfa.process("a")


# Logging


def test_debug_logging():
    messages = []
    logger.enable("fsalgebra")
    handler = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        contains_a().minimized()
    finally:
        logger.remove(handler)
        logger.disable("fsalgebra")
    assert any("Minimized a DFA of 2 states to 2 states" in m for m in messages)
    assert any("Determinized" in m for m in messages)


def test_logging_disabled_by_default():
    messages = []
    handler = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        contains_a().minimized()
    finally:
        logger.remove(handler)
    assert messages == []
