"""A simple factory that builds weapons by name."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

SEPARATOR = "\n------------------\n"


class UnknownWeaponError(ValueError):
    """Raised when the factory is asked for a weapon it cannot build."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Error: Unknown weapon type '{kind}'.")
        self.kind = kind


class Weapon(ABC):
    """Common interface of every weapon."""

    name = "Weapon"

    @abstractmethod
    def use(self) -> str:
        """Use the weapon and describe what happened."""


class Sword(Weapon):
    """A close-combat weapon."""

    name = "Sword"

    def use(self) -> str:
        return "Using Sword: Swish! Slash! Deal close combat damage."


class Bow(Weapon):
    """A long-range weapon."""

    name = "Bow"

    def use(self) -> str:
        return "Using Bow: Twang! Thwack! Deal long-range damage."


_WEAPONS: dict[str, type[Weapon]] = {"sword": Sword, "bow": Bow}


def create_weapon(kind: str) -> Weapon:
    """Build the weapon named ``kind`` ("sword" or "bow")."""
    try:
        weapon_class = _WEAPONS[kind]
    except KeyError:
        raise UnknownWeaponError(kind) from None
    return weapon_class()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create and use each named weapon, reporting unknown ones on stderr."""
    kinds = list(argv) if argv else ["sword", "bow", "axe"]
    for position, kind in enumerate(kinds):
        if position:
            print(SEPARATOR)
        try:
            weapon = create_weapon(kind)
        except UnknownWeaponError as error:
            print(error, file=sys.stderr)
            continue
        print(f"WeaponFactory is creating a {weapon.name}...")
        print(weapon.use())
    return 0


if __name__ == "__main__":
    sys.exit(main())