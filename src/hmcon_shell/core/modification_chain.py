# src/hmcon_shell/core/modification_chain.py
import abc
import logging
from typing import Any, Iterator, List

logger = logging.getLogger(__name__)


class Modifier(metaclass=abc.ABCMeta):
    """
    Abstract base class for all data modifications.

    Modifiers are produced by modifier commands ('mod <name> ...') and are
    opaque to the chain: it only keeps them in order.
    """

    @abc.abstractmethod
    def apply(self, data: Any) -> Any:
        """Returns the modified data. Implementations must not mutate `data`."""
        raise NotImplementedError("Every modifier must implement an 'apply' method.")

    def describe(self) -> str:
        return type(self).__name__


class ModificationChain:
    """Ordered, append-only sequence of modifiers."""

    def __init__(self):
        self._modifiers: List[Modifier] = []

    def add_modifier(self, modifier: Modifier) -> None:
        if modifier is None:
            raise ValueError("Cannot add an empty modifier to the chain.")
        self._modifiers.append(modifier)
        logger.debug("Added modifier #%d: %s", len(self._modifiers), modifier.describe())

    def apply(self, data: Any) -> Any:
        """Runs every modifier over the data in insertion order."""
        for modifier in self._modifiers:
            data = modifier.apply(data)
        return data

    def __iter__(self) -> Iterator[Modifier]:
        return iter(tuple(self._modifiers))

    def __len__(self) -> int:
        return len(self._modifiers)

    def __repr__(self) -> str:
        return f"<ModificationChain modifiers={len(self._modifiers)}>"
