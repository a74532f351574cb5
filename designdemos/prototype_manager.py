"""A registry of named prototypes and a demo that spawns enemies from it."""

from __future__ import annotations

import sys

from designdemos.enemies import DragonEnemy, OrcEnemy, Prototype, SkeletonEnemy


class RegistryFullError(RuntimeError):
    """Raised when a prototype is added to a registry that has no free slot."""


class PrototypeManager:
    """Holds master prototypes under string keys, up to a fixed number of slots.

    Removed entries free their slot, and new entries fill the first free slot,
    so listing order follows slot order. Keys need not be unique; lookups find
    the entry in the earliest slot.
    """

    MAX_PROTOTYPES = 50

    def __init__(self) -> None:
        self._slots: list[tuple[str, Prototype] | None] = []

    def add(self, key: str, prototype: Prototype) -> None:
        """Register a prototype under key.

        Raises TypeError for None and RegistryFullError when every slot is used.
        """
        if prototype is None:
            raise TypeError(f"cannot register None as prototype '{key}'")
        entry = (key, prototype)
        try:
            self._slots[self._slots.index(None)] = entry
        except ValueError:
            if len(self._slots) >= self.MAX_PROTOTYPES:
                raise RegistryFullError(f"Failed to add prototype '{key}'") from None
            self._slots.append(entry)
        print(f"Adding prototype '{key}' of type: {prototype.type_name}")

    def _find(self, key: str) -> int | None:
        for index, entry in enumerate(self._slots):
            if entry is not None and entry[0] == key:
                return index
        return None

    def remove(self, key: str) -> Prototype:
        """Unregister the prototype under key and return it; KeyError if absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(f"Prototype '{key}' not found for removal")
        print(f"Removing prototype '{key}'")
        _, prototype = self._slots[index]  # type: ignore[misc]
        self._slots[index] = None
        return prototype

    def get(self, key: str) -> Prototype | None:
        """The prototype registered under key, or None if there is none."""
        index = self._find(key)
        if index is None:
            print(f"Prototype '{key}' not found")
            return None
        print(f"Retrieved prototype '{key}'")
        return self._slots[index][1]  # type: ignore[index]

    def keys(self) -> list[str]:
        """Registered keys in slot order."""
        return [entry[0] for entry in self._slots if entry is not None]

    def list_prototypes(self) -> None:
        """Print every registered key with its prototype's type."""
        print("\n=== AVAILABLE PROTOTYPES ===")
        if not len(self):
            print("No prototypes registered")
        for entry in self._slots:
            if entry is not None:
                print(f"Key: '{entry[0]}' -> Type: {entry[1].type_name}")
        print("=============================\n")

    def clear(self) -> None:
        """Unregister everything."""
        print("Clearing all prototypes")
        self._slots.clear()

    def __len__(self) -> int:
        return sum(entry is not None for entry in self._slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None


def main(argv: list[str] | None = None) -> int:
    """Register enemy templates, spawn clones of them and remove one template."""
    print("=== PROTOTYPE PATTERN DEMO ===\n")
    manager = PrototypeManager()

    print("1. Creating and registering prototype templates...")
    templates = {
        "basicOrc": OrcEnemy("Basic Orc", 80, 20, "Wooden Club", 1),
        "eliteOrc": OrcEnemy("Elite Orc", 150, 35, "Steel Mace", 5),
        "fireDragon": DragonEnemy("Fire Dragon", 400, 60, "Fire", True, 800),
        "iceDragon": DragonEnemy("Ice Dragon", 450, 55, "Ice", True, 1200),
        "skeleton": SkeletonEnemy("Skeleton Warrior", 50, 15, False, "Normal"),
        "armoredSkeleton": SkeletonEnemy("Armored Skeleton", 90, 25, True, "Reinforced"),
    }
    for key, template in templates.items():
        manager.add(key, template)
    print()
    manager.list_prototypes()

    print("2. Creating enemies by cloning prototypes...\n")
    enemies: list[Prototype] = []
    for _ in range(3):
        orc = manager.get("basicOrc")
        if orc is not None:
            enemies.append(orc.clone())

    elite = manager.get("eliteOrc")
    if elite is not None:
        enemies.append(elite.clone())

    dragon = manager.get("fireDragon")
    if dragon is not None:
        enemies.append(dragon.clone())

    skeleton = manager.get("skeleton")
    if skeleton is not None:
        enemies.extend((skeleton.clone(), skeleton.clone()))

    print("\n3. Displaying all spawned enemies...\n")
    for number, enemy in enumerate(enemies, start=1):
        print(f"Enemy #{number}:")
        enemy.display()
        print()

    print("4. Testing prototype removal...")
    manager.remove("basicOrc")
    manager.list_prototypes()

    print("5. Trying to get removed prototype...")
    if manager.get("basicOrc") is None:
        print("Correctly returned None for removed prototype.")

    print("\n=== DEMO COMPLETE ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())