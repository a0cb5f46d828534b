"""Actor sources and authorizers.

PermissionMapAuthorizer evaluates a permission map the way the HTTP layer's
access config is written: each permission name maps to a bool, a predicate
over the actor, or a list of predicates (any match grants).  Unknown
permissions are denied.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Union

from catalog.domain.models.audit import Actor

Rule = Union[bool, Callable[[Actor], bool], Sequence[Callable[[Actor], bool]]]


class StaticActorSource:
    """Returns the same actor for every call (one instance per request)."""

    def __init__(self, actor: Actor) -> None:
        self._actor = actor

    def current_actor(self) -> Actor:
        return self._actor


SYSTEM_ACTOR = Actor(identifier="system", display_name="System")


class PermissionMapAuthorizer:
    def __init__(self, actor: Actor, rules: Mapping[str, Rule]) -> None:
        self._actor = actor
        self._rules = dict(rules)

    def can(self, permission: str) -> bool:
        rule = self._rules.get(permission)
        if rule is None:
            return False
        if isinstance(rule, bool):
            return rule
        if callable(rule):
            return bool(rule(self._actor))
        return any(check(self._actor) for check in rule)


class AllowAllAuthorizer:
    """Grants everything; for CLI tooling and tests."""

    def can(self, permission: str) -> bool:
        return True
