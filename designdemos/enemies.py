"""Enemy templates that spawn new enemies by copying themselves."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Prototype(ABC):
    """Something that can produce independent copies of itself."""

    @property
    def type_name(self) -> str:
        """The name of the concrete kind of prototype."""
        return type(self).__name__

    def clone(self) -> Prototype:
        """Return a new object with the same field values as this one."""
        duplicate = copy.copy(self)
        print(f"Cloning {self.type_name}: {getattr(self, 'name', '')}")
        return duplicate

    @abstractmethod
    def describe(self) -> str:
        """A multi-line description of this object."""

    def display(self) -> None:
        """Print the description, one line at a time."""
        for line in self.describe().splitlines():
            print(line)


def _announce_creation(enemy: Prototype) -> None:
    print(f"Creating {enemy.type_name}: {getattr(enemy, 'name', '')}")


@dataclass
class OrcEnemy(Prototype):
    name: str = "Orc"
    health: int = 100
    damage: int = 25
    weapon: str = "Club"
    level: int = 1

    def __post_init__(self) -> None:
        _announce_creation(self)

    def clone(self) -> OrcEnemy:
        return super().clone()  # type: ignore[return-value]

    def describe(self) -> str:
        return "\n".join(
            (
                "=== ORC ENEMY ===",
                f"Name: {self.name}",
                f"Health: {self.health}",
                f"Damage: {self.damage}",
                f"Weapon: {self.weapon}",
                f"Level: {self.level}",
                "=================",
            )
        )


@dataclass
class DragonEnemy(Prototype):
    name: str = "Dragon"
    health: int = 500
    damage: int = 75
    element: str = "Fire"
    can_fly: bool = True
    treasure_value: int = 1000

    def __post_init__(self) -> None:
        _announce_creation(self)

    def clone(self) -> DragonEnemy:
        return super().clone()  # type: ignore[return-value]

    def describe(self) -> str:
        return "\n".join(
            (
                "=== DRAGON ENEMY ===",
                f"Name: {self.name}",
                f"Health: {self.health}",
                f"Damage: {self.damage}",
                f"Element: {self.element}",
                f"Can Fly: {'Yes' if self.can_fly else 'No'}",
                f"Treasure Value: {self.treasure_value}",
                "===================",
            )
        )


@dataclass
class SkeletonEnemy(Prototype):
    name: str = "Skeleton"
    health: int = 60
    damage: int = 20
    has_shield: bool = False
    bone_type: str = "Normal"

    def __post_init__(self) -> None:
        _announce_creation(self)

    def clone(self) -> SkeletonEnemy:
        return super().clone()  # type: ignore[return-value]

    def describe(self) -> str:
        return "\n".join(
            (
                "=== SKELETON ENEMY ===",
                f"Name: {self.name}",
                f"Health: {self.health}",
                f"Damage: {self.damage}",
                f"Has Shield: {'Yes' if self.has_shield else 'No'}",
                f"Bone Type: {self.bone_type}",
                "=====================",
            )
        )