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

"""Helpers for treating sequences of state identifiers as sets with a
stable, canonical form.
"""


def deduped(items):
    """
    Returns a new list with duplicates removed, keeping the order in which
    items first appear.

    Args:
        items (iterable): Hashable items.

    Returns:
        list: The distinct items in first-occurrence order.

    Example:
        >>> deduped("abcab")
        ['a', 'b', 'c']
    """
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _fallback_key(item):
    return (type(item).__name__, repr(item))


def stable_sorted(items):
    """
    Sorts opaque identifiers into a deterministic order.

    Identifiers are sorted by their natural order when they have one. A
    collection that can't be compared directly (for example a mix of
    strings and integers) is sorted by type name and then by ``repr``, so
    the result never depends on hashing or insertion order.

    Args:
        items (iterable): The identifiers to sort.

    Returns:
        list: The sorted identifiers.
    """
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=_fallback_key)


def index_map(items):
    """Maps each identifier to its position in ``stable_sorted(items)``."""
    return {item: i for i, item in enumerate(stable_sorted(items))}


def canonical_name(states, index):
    """
    Returns the canonical name of a set of states.

    Each member is replaced by its position in ``index``, the positions are
    sorted numerically and joined with single spaces. Two sets with the same
    members therefore get the same name however they were discovered. The
    empty set is named ``""``.

    Args:
        states (iterable): The member states. Duplicates are ignored.
        index (dict): Maps every possible member to its stable position, as
            returned by :func:`index_map`.

    Returns:
        str: The canonical name.

    Example:
        >>> canonical_name({"q2", "q0"}, index_map(["q0", "q1", "q2"]))
        '0 2'
    """
    return " ".join(str(n) for n in sorted({index[s] for s in states}))
