"""RuleRepository - ordered collection of rules."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator, MutableSequence
from functools import reduce as _reduce
from typing import overload

from authority.rules._rule import Rule

__all__ = ["RuleRepository"]


class RuleRepository(MutableSequence[Rule]):
    """Ordered, append-only (in normal use) list of rules.

    Insertion order is significant: when several rules are relevant to a
    query, the one added last decides. Identical rules are not
    deduplicated. Filtering never mutates the receiver; it returns a new
    repository.

    Example::

        repo = RuleRepository()
        repo.add(Rule(True, "read", "Post"))
        relevant = repo.get_relevant_rules({"read"}, "Post")
        assert relevant.count() == 1
    """

    def __init__(self, rules: Iterable[Rule] | None = None) -> None:
        self._rules: list[Rule] = list(rules) if rules is not None else []

    def add(self, rule: Rule) -> None:
        """Append *rule* after every rule already stored."""
        self._rules.append(rule)

    def reduce(
        self,
        fn: Callable[[list[Rule], Rule], list[Rule]],
        initial: list[Rule] | None = None,
    ) -> RuleRepository:
        """Fold *fn* over the rules and wrap the resulting list.

        ``fn`` receives the accumulated list and the current rule and
        returns the new accumulator. The receiver is left untouched.

        Args:
            fn: ``(accumulator, rule) -> accumulator``.
            initial: Starting accumulator. Defaults to a new empty list.

        Returns:
            A new ``RuleRepository`` holding the fold result.
        """
        start: list[Rule] = list(initial) if initial is not None else []
        return type(self)(_reduce(fn, self._rules, start))

    def get_relevant_rules(self, actions: Collection[str], resource: str) -> RuleRepository:
        """Return the rules relevant to *actions* on *resource*, in stored order."""

        def _collect(acc: list[Rule], rule: Rule) -> list[Rule]:
            if rule.is_relevant(actions, resource):
                acc.append(rule)
            return acc

        return self.reduce(_collect)

    def first(self) -> Rule | None:
        return self._rules[0] if self._rules else None

    def last(self) -> Rule | None:
        return self._rules[-1] if self._rules else None

    def all(self) -> list[Rule]:
        """Return a copy of the stored rules as a plain list."""
        return list(self._rules)

    def is_empty(self) -> bool:
        return not self._rules

    def count(self, value: object = None) -> int:  # type: ignore[override]
        """Return the number of rules, or occurrences of *value* if given."""
        if value is None:
            return len(self._rules)
        return self._rules.count(value)  # type: ignore[arg-type]

    def exists(self, index: int) -> bool:
        """Return ``True`` if *index* is a stored position (negative indices are not)."""
        return 0 <= index < len(self._rules)

    # -- MutableSequence protocol -------------------------------------------

    @overload
    def __getitem__(self, index: int) -> Rule: ...

    @overload
    def __getitem__(self, index: slice) -> RuleRepository: ...

    def __getitem__(self, index: int | slice) -> Rule | RuleRepository:
        if isinstance(index, slice):
            return type(self)(self._rules[index])
        return self._rules[index]

    def __setitem__(self, index: int, rule: Rule) -> None:  # type: ignore[override]
        self._rules[index] = rule

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        del self._rules[index]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))

    def insert(self, index: int, rule: Rule) -> None:
        self._rules.insert(index, rule)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleRepository):
            return NotImplemented
        return self._rules == other._rules

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RuleRepository({self._rules!r})"
