"""
Default Value Policies
======================

Every map fills new slots from a default policy. A policy is either a
constant shared by every slot or a generator called with the physical index
of the slot being materialized:

    Constant(None).value_for(3)            # None
    Generator(lambda i: i * 10).value_for(3)  # 30

``as_default_policy`` turns the loose "value or function" argument accepted by
map constructors into one of the two variants.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List


class DefaultPolicy(ABC):
    """Produces the value stored in a freshly created slot."""

    @abstractmethod
    def value_for(self, index: int) -> Any:
        """Return the default value for physical index ``index``."""
        pass

    def materialize(self, indexes: Iterable[int]) -> List[Any]:
        return [self.value_for(index) for index in indexes]


@dataclass(frozen=True)
class Constant(DefaultPolicy):
    """Same value for every slot."""

    value: Any = None

    def value_for(self, index: int) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


@dataclass(frozen=True)
class Generator(DefaultPolicy):
    """Value computed per slot from its physical index."""

    fn: Callable[[int], Any]

    def value_for(self, index: int) -> Any:
        return self.fn(index)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"Generator({name})"


def as_default_policy(value_or_fn: Any = None) -> DefaultPolicy:
    """
    Normalize a constructor argument into a DefaultPolicy.

    Policies pass through untouched, callables become generators and anything
    else (``None`` included) becomes a constant.
    """
    if isinstance(value_or_fn, DefaultPolicy):
        return value_or_fn
    if callable(value_or_fn):
        return Generator(value_or_fn)
    return Constant(value_or_fn)
