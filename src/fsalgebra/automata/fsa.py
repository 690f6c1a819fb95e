# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

from collections import deque
from types import MappingProxyType

from cached_property import cached_property
from loguru import logger

from fsalgebra.util import canonical_name, deduped, index_map, stable_sorted

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are named sentinels that can never collide with a user supplied
    symbol, because they only compare equal to themselves.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("start")
        >>> marker.name
        'start'
        >>> repr(marker)
        '<start>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


# The label of transitions that consume no input. Never an alphabet member.
EPSILON = Marker("EPSILON")


# Exceptions


class AutomatonError(Exception):
    """
    Base class for every error raised by the automata in this module.

    Attributes:
        message (str): Explanation of the error.
    """

    def __init__(self, message):
        """
        Initialize a new instance of AutomatonError.

        Args:
            message (str): Explanation of the error.
        """
        self.message = message
        super().__init__(message)


class MalformedAutomaton(AutomatonError):
    """
    Exception raised when an automaton is constructed from an inconsistent
    definition.

    This covers transition tables, initial states or final states that refer
    to undeclared states, transitions on symbols outside the alphabet, an
    alphabet containing the EPSILON marker, and (for DFAs) a transition table
    that is not total. Construction fails before anything is stored, so a
    partially built automaton is never observable.
    """

    pass


class MalformedDFA(MalformedAutomaton):
    """Raised when a :class:`DFA` definition is malformed."""

    pass


class MalformedNFA(MalformedAutomaton):
    """Raised when an :class:`NFA` definition is malformed."""

    pass


class InvalidSymbol(AutomatonError):
    """
    Exception raised when a query is given a symbol outside the automaton's
    alphabet, or when EPSILON is passed where a real symbol is required.

    Attributes:
        symbol: The offending symbol.
        message (str): Explanation of the error.
    """

    def __init__(self, symbol, message=None):
        self.symbol = symbol
        if message is None:
            message = f"{symbol!r} is not a symbol of the alphabet"
        super().__init__(message)


class InvalidState(AutomatonError):
    """
    Exception raised when a query names states that the automaton does not
    declare.

    Attributes:
        states (frozenset): The undeclared states.
        message (str): Explanation of the error.
    """

    def __init__(self, states, message=None):
        self.states = frozenset(states)
        if message is None:
            message = f"Undeclared states: {stable_sorted(self.states)!r}"
        super().__init__(message)


class UndefinedTransition(AutomatonError):
    """
    Exception raised when a walk over a deterministic automaton reaches a
    state with no transition for the next symbol.

    Well-formed DFAs are total, so this signals a corrupted transition table.

    Attributes:
        state: The state the walk was in.
        symbol: The symbol that had no transition.
        message (str): Explanation of the error.
    """

    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super().__init__(f"No transition from {state!r} on {symbol!r}")


# Helpers


def _checked_alphabet(alphabet, error):
    # A tuple that is already deduplicated is kept as is, so automata derived
    # from one another share the same alphabet object
    symbols = deduped(alphabet)
    if EPSILON in symbols:
        raise error("EPSILON can't be a member of the alphabet")
    if isinstance(alphabet, tuple) and len(symbols) == len(alphabet):
        return alphabet
    return tuple(symbols)


# Base class


class FSA:
    """
    Finite State Automaton (FSA) base class.

    An automaton is an immutable value: the transition table is exposed as a
    read-only mapping of read-only mappings and state collections are
    frozensets, and attributes can't be reassigned once construction is
    done. Every operation returns a new automaton and leaves its
    receiver untouched, so transformations can be chained freely::

        dfa.to_nfa().reversed().to_dfa()

    Attributes:
        alphabet (tuple): The symbols of the automaton, deduplicated, in the
            order they were given. This order is the enumeration order used
            by every traversal.
        states (frozenset): The declared states, i.e. the keys of the
            transition table.
        transitions (mapping): ``transitions[state][label]`` gives the
            destination(s) of a transition.
        final_states (frozenset): The accepting states.
    """

    def __len__(self):
        """Returns the number of states in the automaton."""
        return len(self.states)

    def __eq__(self, other):
        """
        Checks if two automata are structurally equal.

        Two automata are equal when they are of the same kind and have the
        same alphabet, states, transitions, initial state(s) and final
        states. Provenance flags such as ``is_minimized`` are ignored.
        """
        if type(self) is not type(other):
            return NotImplemented
        return self._content == other._content

    def __hash__(self):
        return hash(self._content)

    def __setattr__(self, name, value):
        if self.__dict__.get("_frozen"):
            raise AttributeError(
                f"{type(self).__name__} is immutable, can't set {name!r}"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if self.__dict__.get("_frozen"):
            raise AttributeError(
                f"{type(self).__name__} is immutable, can't delete {name!r}"
            )
        super().__delattr__(name)

    @cached_property
    def _symbols(self):
        return frozenset(self.alphabet)

    @cached_property
    def _string_alphabet(self):
        return all(
            isinstance(label, str) and len(label) == 1 for label in self.alphabet
        )

    @cached_property
    def sorted_states(self):
        """The states in a stable, deterministic order."""
        return tuple(stable_sorted(self.states))

    @cached_property
    def _state_index(self):
        return index_map(self.states)

    def _symbols_of(self, string):
        """
        Splits the input into symbols and checks each one against the
        alphabet.

        A ``str`` is read one character per symbol. Alphabets whose symbols
        are longer tokens should be fed any other iterable of symbols, such
        as a list or tuple.

        Raises:
            InvalidSymbol: If a symbol is not in the alphabet.
        """
        symbols = tuple(string)
        for label in symbols:
            if label not in self._symbols:
                raise InvalidSymbol(label)
        return symbols

    def _check_states(self, states):
        undeclared = states - self.states
        if undeclared:
            raise InvalidState(undeclared)

    def _as_string(self, symbols):
        if self._string_alphabet:
            return "".join(symbols)
        return tuple(symbols)

    def start(self):
        """
        Returns the state (DFA) or set of states (NFA) a run starts in.
        """
        raise NotImplementedError

    def is_final(self, state):
        """
        Checks if a state (DFA) or set of states (NFA) accepts.
        """
        raise NotImplementedError

    def process(self, string):
        """
        Checks if the automaton's language contains the given string.

        Args:
            string (str or iterable): The input, read one symbol at a time.

        Returns:
            bool: True if the string is accepted, False otherwise.

        Raises:
            InvalidSymbol: If the input contains a symbol outside the
                alphabet. Nothing is processed in that case.
        """
        raise NotImplementedError

    def accept(self, string):
        """An alias for :meth:`process`."""
        return self.process(string)

    def to_dfa(self):
        """
        Returns an equivalent deterministic automaton.
        """
        raise NotImplementedError

    def minimized(self):
        """
        Returns the minimal DFA accepting the same language.
        """
        raise NotImplementedError


# Implementations


class NFA(FSA):
    """
    NFA (Non-Deterministic Finite Automaton) class.

    An NFA may have several initial states and EPSILON transitions, and its
    transition table may be partial: a missing entry means the empty set of
    destinations. It is the algebraic core of the module; subset
    construction, reversal and minimization are all carried out on NFAs.

    Attributes:
        alphabet (tuple): The input symbols.
        states (frozenset): The declared states.
        transitions (mapping): ``transitions[state][label]`` is a frozenset
            of destination states, where ``label`` is an alphabet symbol or
            :data:`EPSILON`. Labels without destinations are omitted.
        initial_states (frozenset): The states a run starts in.
        final_states (frozenset): The accepting states.

    Example:
        >>> nfa = NFA("ab", {
        ...     0: {"a": {0, 1}, "b": {0}},
        ...     1: {"b": {2}},
        ...     2: {},
        ... }, {0}, {2})
        >>> nfa.process("aab")
        True
        >>> nfa.process("aba")
        False
    """

    def __init__(self, alphabet, transitions, initial_states, final_states):
        """
        Builds an NFA, validating the definition first.

        Args:
            alphabet (iterable): The input symbols. Duplicates are dropped,
                first occurrence order is kept.
            transitions (mapping): Maps each state to a mapping from labels
                (alphabet symbols or EPSILON) to a collection of destination
                states. A bare string is rejected rather than split into
                characters. Its keys declare the states of the automaton; a state
                without outgoing transitions maps to an empty mapping.
            initial_states (iterable): The start states.
            final_states (iterable): The accepting states.

        Raises:
            MalformedNFA: If a transition uses a label outside the alphabet,
                or a destination, initial or final state is undeclared, or
                the alphabet contains EPSILON.
        """
        alphabet = _checked_alphabet(alphabet, MalformedNFA)
        labels = set(alphabet)
        labels.add(EPSILON)

        table = {}
        for src, trans in transitions.items():
            frozen = {}
            for label, dests in trans.items():
                if label not in labels:
                    raise MalformedNFA(
                        f"State {src!r} has a transition on {label!r}, "
                        "which is not in the alphabet"
                    )
                if isinstance(dests, (str, bytes)):
                    raise MalformedNFA(
                        f"Transition {src!r} -{label!r}-> must give a collection "
                        f"of destination states, not {dests!r}"
                    )
                dests = frozenset(dests)
                if dests:
                    frozen[label] = dests
            table[src] = MappingProxyType(frozen)
        states = frozenset(table)

        for src, trans in table.items():
            for label, dests in trans.items():
                undeclared = dests - states
                if undeclared:
                    raise MalformedNFA(
                        f"Transition {src!r} -{label!r}-> leads to undeclared "
                        f"states {stable_sorted(undeclared)!r}"
                    )
        initial_states = frozenset(initial_states)
        if not initial_states <= states:
            raise MalformedNFA(
                "Undeclared initial states: "
                f"{stable_sorted(initial_states - states)!r}"
            )
        final_states = frozenset(final_states)
        if not final_states <= states:
            raise MalformedNFA(
                "Undeclared final states: "
                f"{stable_sorted(final_states - states)!r}"
            )

        self.alphabet = alphabet
        self.states = states
        self.transitions = MappingProxyType(table)
        self.initial_states = initial_states
        self.final_states = final_states
        self._frozen = True

    def __repr__(self):
        return (
            f"<NFA states={len(self.states)} alphabet={len(self.alphabet)} "
            f"initial={len(self.initial_states)} final={len(self.final_states)}>"
        )

    @cached_property
    def _content(self):
        return (
            self.alphabet,
            self.states,
            frozenset(self.triples()),
            self.initial_states,
            self.final_states,
        )

    def triples(self):
        """
        Generates every transition of the NFA.

        Yields:
            tuple: A triple (source state, label, destination state). The
            label is an alphabet symbol or EPSILON.
        """
        for src, trans in self.transitions.items():
            for label, dests in trans.items():
                for dest in dests:
                    yield src, label, dest

    def start(self):
        """
        Returns the epsilon closure of the initial states.

        Returns:
            frozenset: The set of states a run starts in.
        """
        return self._closure(self.initial_states)

    def is_final(self, states):
        """
        Checks if any of the given states is a final state.

        Args:
            states (iterable): The set of states to check.

        Returns:
            bool: True if any of the states is a final state, False otherwise.
        """
        return not self.final_states.isdisjoint(states)

    def _closure(self, states):
        transitions = self.transitions
        closure = set(states)
        frontier = list(closure)
        while frontier:
            state = frontier.pop()
            for dest in transitions[state].get(EPSILON, ()):
                if dest not in closure:
                    closure.add(dest)
                    frontier.append(dest)
        return frozenset(closure)

    def _move(self, states, label):
        transitions = self.transitions
        dests = set()
        for state in states:
            dests.update(transitions[state].get(label, ()))
        return self._closure(dests)

    def epsilon_closure(self, states):
        """
        Expands a set of states by following EPSILON transitions.

        The result holds every state reachable from ``states`` through zero
        or more EPSILON transitions. Only the resulting set is meaningful,
        not the order states were visited in, and the closure of a closure is
        the closure itself. Use :meth:`name_of` for a canonical, ordered
        representation.

        Args:
            states (iterable): The set of states to expand. It is not
                modified.

        Returns:
            frozenset: The expanded set of states.

        Raises:
            InvalidState: If ``states`` contains undeclared states.

        Example:
            >>> nfa = NFA("a", {0: {EPSILON: {1}}, 1: {EPSILON: {2}}, 2: {}},
            ...           {0}, {2})
            >>> sorted(nfa.epsilon_closure({0}))
            [0, 1, 2]
        """
        states = frozenset(states)
        self._check_states(states)
        return self._closure(states)

    def step(self, states, label):
        """
        Runs the machine for one symbol.

        Collects the destinations of every ``label`` transition leaving
        ``states`` and returns their epsilon closure. ``states`` is expected
        to be epsilon closed already, as returned by :meth:`start` or a
        previous call to this method.

        Args:
            states (iterable): The current set of states.
            label: An alphabet symbol.

        Returns:
            frozenset: The set of states after reading ``label``.

        Raises:
            InvalidSymbol: If ``label`` is EPSILON or not in the alphabet.
            InvalidState: If ``states`` contains undeclared states.
        """
        if label is EPSILON:
            raise InvalidSymbol(label, "EPSILON can't be read as input")
        if label not in self._symbols:
            raise InvalidSymbol(label)
        states = frozenset(states)
        self._check_states(states)
        return self._move(states, label)

    def next_state(self, states, label):
        """An alias for :meth:`step`."""
        return self.step(states, label)

    def name_of(self, states):
        """
        Returns the canonical name of a set of this NFA's states.

        The name depends only on the members of the set, never on the order
        they were found in. It is the name :meth:`to_dfa` gives the DFA state
        standing for the set.

        Raises:
            InvalidState: If ``states`` contains undeclared states.
        """
        states = frozenset(states)
        self._check_states(states)
        return canonical_name(states, self._state_index)

    def process(self, string):
        """
        Checks if the NFA accepts the given string.

        The run starts from the epsilon closure of the initial states and
        steps once per symbol. The string is accepted if the final set of
        states contains a final state.

        Raises:
            InvalidSymbol: If the input contains a symbol outside the
                alphabet. Nothing is processed in that case.
        """
        symbols = self._symbols_of(string)
        states = self.start()
        for label in symbols:
            states = self._move(states, label)
            if not states:
                return False
        return self.is_final(states)

    def to_dfa(self):
        """
        Converts the NFA to a DFA using the subset construction.

        Each DFA state stands for an epsilon closed set of NFA states and is
        named by :meth:`name_of`, so the result does not depend on the order
        sets are discovered in. The construction visits every alphabet symbol
        from every discovered set, which makes the transition table total:
        when no transition exists the empty set, named ``""``, acts as a dead
        state. A DFA state accepts if its set contains a final state.

        Returns:
            DFA: An equivalent DFA with synthetic string state names.
        """
        index = self._state_index
        start = self.start()
        initial = canonical_name(start, index)
        transitions = {}
        final_states = set()

        frontier = [start]
        seen = {initial}
        while frontier:
            current = frontier.pop()
            name = canonical_name(current, index)
            if self.is_final(current):
                final_states.add(name)
            trans = transitions[name] = {}
            for label in self.alphabet:
                dest = self._move(current, label)
                dest_name = canonical_name(dest, index)
                trans[label] = dest_name
                if dest_name not in seen:
                    seen.add(dest_name)
                    frontier.append(dest)

        dfa = DFA(self.alphabet, transitions, initial, final_states)
        logger.debug(
            "Determinized an NFA of {} states into a DFA of {} states",
            len(self),
            len(dfa),
        )
        return dfa

    def reversed(self):
        """
        Returns the NFA given by reversing every transition and swapping the
        initial and final states.

        Every transition ``s -label-> t``, EPSILON transitions included,
        becomes ``t -label-> s``. The initial states of the result are this
        NFA's final states and vice versa. The result accepts exactly the
        reverses of the strings this NFA accepts.

        Returns:
            NFA: The reversed NFA, with the same states.
        """
        transitions = {state: {} for state in self.states}
        for src, label, dest in self.triples():
            transitions[dest].setdefault(label, set()).add(src)
        nfa = NFA(self.alphabet, transitions, self.final_states, self.initial_states)
        logger.debug("Reversed an NFA of {} states", len(nfa))
        return nfa

    def minimized(self):
        """
        Returns the minimal DFA accepting the same language, i.e.
        ``self.to_dfa().minimized()``.
        """
        return self.to_dfa().minimized()


class DFA(FSA):
    """
    Deterministic Finite Automaton (DFA) class.

    The transition function is total: every state has exactly one outgoing
    transition for every alphabet symbol. That makes membership testing a
    single walk and makes the DFA a canonical output format for the
    transformations in this module.

    Attributes:
        alphabet (tuple): The input symbols.
        states (frozenset): The declared states.
        transitions (mapping): ``transitions[state][symbol]`` is the
            destination state.
        initial: The start state.
        final_states (frozenset): The accepting states.
        is_minimized (bool): True if the DFA was produced by
            :meth:`minimized`. This records provenance only and doesn't
            affect equality.

    Example:
        >>> dfa = DFA("ab", {
        ...     "s0": {"a": "s1", "b": "s0"},
        ...     "s1": {"a": "s1", "b": "s1"},
        ... }, "s0", {"s1"})
        >>> dfa.process("bba")
        True
        >>> dfa.find_passing()
        'a'
    """

    def __init__(self, alphabet, transitions, initial, final_states, minimized=False):
        """
        Builds a DFA, validating the definition first.

        Args:
            alphabet (iterable): The input symbols. Duplicates are dropped,
                first occurrence order is kept.
            transitions (mapping): Maps each state to a mapping from every
                alphabet symbol to a destination state. Its keys declare the
                states of the automaton.
            initial: The start state.
            final_states (iterable): The accepting states.
            minimized (bool, optional): Provenance flag stored as
                ``is_minimized``. Defaults to False.

        Raises:
            MalformedDFA: If the table is not total, uses a symbol outside
                the alphabet or leads to an undeclared state, if the initial
                or a final state is undeclared, or if the alphabet contains
                EPSILON.
        """
        alphabet = _checked_alphabet(alphabet, MalformedDFA)
        symbols = frozenset(alphabet)

        table = {}
        for src, trans in transitions.items():
            extra = [label for label in trans if label not in symbols]
            if extra:
                raise MalformedDFA(
                    f"State {src!r} has transitions on {extra!r}, "
                    "which are not in the alphabet"
                )
            missing = [label for label in alphabet if label not in trans]
            if missing:
                raise MalformedDFA(f"State {src!r} has no transition on {missing!r}")
            table[src] = MappingProxyType({label: trans[label] for label in alphabet})
        states = frozenset(table)

        for src, trans in table.items():
            for label, dest in trans.items():
                if dest not in states:
                    raise MalformedDFA(
                        f"Transition {src!r} -{label!r}-> leads to undeclared "
                        f"state {dest!r}"
                    )
        if initial not in states:
            raise MalformedDFA(f"Undeclared initial state {initial!r}")
        final_states = frozenset(final_states)
        if not final_states <= states:
            raise MalformedDFA(
                "Undeclared final states: "
                f"{stable_sorted(final_states - states)!r}"
            )

        self.alphabet = alphabet
        self.states = states
        self.transitions = MappingProxyType(table)
        self.initial = initial
        self.final_states = final_states
        self.is_minimized = minimized
        self._frozen = True

    def __repr__(self):
        return (
            f"<DFA states={len(self.states)} alphabet={len(self.alphabet)} "
            f"final={len(self.final_states)}>"
        )

    @cached_property
    def _content(self):
        triples = frozenset(
            (src, label, dest)
            for src, trans in self.transitions.items()
            for label, dest in trans.items()
        )
        return (self.alphabet, self.states, triples, self.initial, self.final_states)

    def start(self):
        """
        Returns the initial state of the DFA.
        """
        return self.initial

    def is_final(self, state):
        """
        Checks if the specified state is a final state of the DFA.
        """
        return state in self.final_states

    def next_state(self, src, label):
        """
        Returns the state reached from ``src`` by reading ``label``.

        Args:
            src: The current state.
            label: An alphabet symbol.

        Returns:
            The destination state.

        Raises:
            InvalidSymbol: If ``label`` is not in the alphabet.
            UndefinedTransition: If the table has no entry for the pair.
        """
        if label not in self._symbols:
            raise InvalidSymbol(label)
        return self._next(src, label)

    def _next(self, src, label):
        try:
            return self.transitions[src][label]
        except KeyError:
            raise UndefinedTransition(src, label) from None

    def process(self, string):
        """
        Walks the transition table from the initial state and checks if the
        walk ends in a final state.

        Raises:
            InvalidSymbol: If the input contains a symbol outside the
                alphabet. Nothing is processed in that case.
            UndefinedTransition: If the walk meets a missing table entry.
        """
        symbols = self._symbols_of(string)
        state = self.initial
        for label in symbols:
            state = self._next(state, label)
        return state in self.final_states

    def _bfs(self, src):
        # Yields (state, label, dest) for every edge leaving a reached state,
        # visiting states breadth first and labels in alphabet order. ``dest``
        # is always reported; callers track which destinations are new.
        queue = deque([src])
        seen = {src}
        while queue:
            state = queue.popleft()
            for label in self.alphabet:
                dest = self._next(state, label)
                yield state, label, dest
                if dest not in seen:
                    seen.add(dest)
                    queue.append(dest)

    def reachable_from(self, src, inclusive=True):
        """
        Returns the set of states that can be reached from the specified
        source state.

        Args:
            src: The source state.
            inclusive (bool, optional): Specifies whether the source state
                should be included in the result even when no cycle leads
                back to it. Defaults to True.

        Returns:
            set: The set of reachable states.

        Raises:
            InvalidState: If ``src`` is not a state of the DFA.
        """
        self._check_states({src})
        reached = set()
        if inclusive:
            reached.add(src)
        for _, _, dest in self._bfs(src):
            reached.add(dest)
        return reached

    def without_unreachables(self):
        """
        Returns an equivalent DFA without the states that can't be reached
        from the initial state.

        The transitions and final states of the reachable states are kept
        unchanged, as is the initial state, so the language is the same.

        Returns:
            DFA: The pruned DFA.
        """
        reached = self.reachable_from(self.initial)
        transitions = {src: self.transitions[src] for src in reached}
        dfa = DFA(
            self.alphabet,
            transitions,
            self.initial,
            self.final_states & reached,
            minimized=self.is_minimized,
        )
        logger.debug(
            "Pruned {} unreachable states out of {}", len(self) - len(dfa), len(self)
        )
        return dfa

    def find_passing(self):
        """
        Returns one of the shortest strings accepted by the DFA, or None if
        the DFA accepts nothing.

        The search is breadth first from the initial state and tries symbols
        in alphabet order, returning as soon as it reaches a final state. So
        when several shortest strings exist, the one returned is the first
        found by that order: shorter paths before longer ones, and among
        paths of one length, the one whose earliest differing symbol comes
        first in the alphabet's enumeration order.

        Returns:
            str or tuple or None: The empty string if the initial state
            accepts. A ``str`` when every alphabet symbol is a single
            character, otherwise a tuple of symbols. None when no final state is
            reachable.

        Example:
            >>> dfa = DFA("ab", {0: {"a": 1, "b": 2}, 1: {"a": 1, "b": 1},
            ...                  2: {"a": 2, "b": 1}}, 0, {1})
            >>> dfa.find_passing()
            'a'
        """
        if self.initial in self.final_states:
            return self._as_string(())
        paths = {self.initial: ()}
        for src, label, dest in self._bfs(self.initial):
            if dest not in paths:
                path = paths[src] + (label,)
                if dest in self.final_states:
                    return self._as_string(path)
                paths[dest] = path
        return None

    def is_empty(self):
        """Returns True if the DFA accepts no string at all."""
        return self.find_passing() is None

    def to_nfa(self):
        """
        Returns the same automaton as an NFA, with the same state names.

        Returns:
            NFA: An NFA with a single initial state, no EPSILON transitions
            and a singleton destination set for every transition.
        """
        transitions = {
            src: {label: (dest,) for label, dest in trans.items()}
            for src, trans in self.transitions.items()
        }
        return NFA(self.alphabet, transitions, (self.initial,), self.final_states)

    def to_dfa(self):
        """
        Returns a reference to itself.
        """
        return self

    def minimized(self):
        """
        Returns the minimal DFA equivalent to this one, using Brzozowski's
        algorithm.

        Reversing a DFA and determinizing the reversal with the subset
        construction yields a DFA whose states can all be reached from its
        initial state and are pairwise distinguishable in the reversed
        language. Applying the same two steps once more gives back the
        original language, and the determinized result is then the unique
        (up to renaming) minimal total DFA::

            dfa.to_nfa().reversed().to_dfa().to_nfa().reversed().to_dfa()

        State names of the result are synthetic (see :meth:`NFA.name_of`)
        and unrelated to this DFA's names; use :func:`renumber_dfa` for
        friendlier ones. The result has ``is_minimized`` set. This DFA is
        not modified.

        Returns:
            DFA: The minimal equivalent DFA.
        """
        once = self.to_nfa().reversed().to_dfa()
        twice = once.to_nfa().reversed().to_dfa()
        dfa = DFA(
            twice.alphabet,
            twice.transitions,
            twice.initial,
            twice.final_states,
            minimized=True,
        )
        logger.debug("Minimized a DFA of {} states to {} states", len(self), len(dfa))
        return dfa


# Useful functions


def renumber_dfa(dfa, base=0):
    """
    Renumber the states of a DFA with consecutive integers.

    States are numbered in the order a breadth first walk from the initial
    state discovers them, trying symbols in alphabet order, so the initial
    state gets ``base``. States the walk can't reach are numbered afterwards
    in their stable sorted order. This is handy after :meth:`DFA.minimized`
    or :meth:`NFA.to_dfa`, whose state names are synthetic.

    Args:
        dfa (DFA): The DFA to renumber. It is not modified.
        base (int, optional): The number of the initial state. Defaults to 0.

    Returns:
        DFA: The renumbered DFA, with the same ``is_minimized`` flag.

    Example:
        >>> dfa = DFA("ab", {"s0": {"a": "s1", "b": "s0"},
        ...                  "s1": {"a": "s1", "b": "s1"}}, "s0", {"s1"})
        >>> small = renumber_dfa(dfa.minimized(), base=1)
        >>> small.initial
        1
    """
    order = [dfa.initial]
    seen = {dfa.initial}
    for _, _, dest in dfa._bfs(dfa.initial):
        if dest not in seen:
            seen.add(dest)
            order.append(dest)
    order.extend(s for s in dfa.sorted_states if s not in seen)
    mapping = {state: n for n, state in enumerate(order, base)}

    transitions = {
        mapping[src]: {label: mapping[dest] for label, dest in trans.items()}
        for src, trans in dfa.transitions.items()
    }
    return DFA(
        dfa.alphabet,
        transitions,
        mapping[dfa.initial],
        {mapping[s] for s in dfa.final_states},
        minimized=dfa.is_minimized,
    )
