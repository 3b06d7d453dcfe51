"""
Scope: the live key-value state with a reverse value-count index.
"""

from typing import Dict, Optional


class Scope:
    """
    Key-value state backed by two dicts.

    ``key_val`` maps keys to integer values and ``val_quant`` counts how many
    keys currently hold each value, so NUMEQUALTO never scans the keys.
    Entries in ``val_quant`` are only ever incremented or decremented, never
    removed: a value that no key holds any more stays in the index at 0.
    """

    def __init__(self) -> None:
        self.key_val: Dict[str, int] = {}
        self.val_quant: Dict[int, int] = {}

    def set(self, key: str, value: int) -> None:
        """Set ``key`` to ``value``, moving its count in the reverse index."""
        if key in self.key_val:
            old_value = self.key_val[key]
            if old_value in self.val_quant:
                self.val_quant[old_value] -= 1

        self.key_val[key] = value
        self.val_quant[value] = self.val_quant.get(value, 0) + 1

    def unset(self, key: str) -> None:
        """Remove ``key``. Unknown keys are ignored."""
        if key not in self.key_val:
            return

        old_value = self.key_val.pop(key)
        if old_value in self.val_quant:
            self.val_quant[old_value] -= 1

    def get(self, key: str) -> Optional[int]:
        """Return the value stored at ``key`` or None."""
        return self.key_val.get(key)

    def num_equal_to(self, value: int) -> int:
        """Return how many keys are set to ``value``."""
        return self.val_quant.get(value, 0)

    def copy(self) -> 'Scope':
        """Return an independent copy sharing no dicts with this scope."""
        snapshot = Scope()
        snapshot.key_val = dict(self.key_val)
        snapshot.val_quant = dict(self.val_quant)
        return snapshot

    def restore(self, snapshot: 'Scope') -> None:
        """Replace this scope's state wholesale with ``snapshot``'s.

        The snapshot hands over its dicts, so it must not be used afterwards.
        """
        self.key_val = snapshot.key_val
        self.val_quant = snapshot.val_quant

    def __len__(self) -> int:
        return len(self.key_val)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return self.key_val == other.key_val and self.val_quant == other.val_quant

    def __repr__(self) -> str:
        return f"Scope(key_val={self.key_val!r}, val_quant={self.val_quant!r})"
