"""Data model for generated non-player characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class CharacterClass(Enum):
    """Character classes an NPC can belong to."""

    FIGHTER = "Fighter"
    ROGUE = "Rogue"
    WIZARD = "Wizard"
    CLERIC = "Cleric"
    RANGER = "Ranger"
    MONK = "Monk"
    BARBARIAN = "Barbarian"
    BARD = "Bard"
    CHAMPION = "Champion"
    DRUID = "Druid"
    ALCHEMIST = "Alchemist"
    SORCERER = "Sorcerer"

    def __str__(self) -> str:
        return self.value


class Proficiency(Enum):
    """Proficiency ranks for skills."""

    UNTRAINED = "Untrained"
    TRAINED = "Trained"
    EXPERT = "Expert"
    MASTER = "Master"
    LEGENDARY = "Legendary"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AbilityScores:
    """The six ability scores."""

    strength: int
    dexterity: int
    constitution: int
    intelligence: int
    wisdom: int
    charisma: int

    def to_dict(self) -> dict[str, int]:
        """Return the scores as a plain mapping in canonical order."""
        return {
            "strength": self.strength,
            "dexterity": self.dexterity,
            "constitution": self.constitution,
            "intelligence": self.intelligence,
            "wisdom": self.wisdom,
            "charisma": self.charisma,
        }


@dataclass(frozen=True)
class Saves:
    """Saving throw modifiers."""

    fortitude: int
    reflex: int
    will: int


@dataclass(frozen=True)
class Skill:
    """A skill with its modifier and proficiency rank."""

    name: str
    modifier: int
    proficiency: Proficiency


@dataclass(frozen=True)
class Attack:
    """A single attack entry of a stat block."""

    name: str
    attack_bonus: int
    damage: str
    traits: tuple[str, ...] = ()


@dataclass
class Npc:
    """A complete non-player character stat block."""

    name: str
    level: int
    character_class: CharacterClass
    ability_scores: AbilityScores
    hp: int
    ac: int
    saves: Saves
    skills: list[Skill] = field(default_factory=list)
    attacks: list[Attack] = field(default_factory=list)
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the stat block."""
        return {
            "name": self.name,
            "level": self.level,
            "class": self.character_class.value,
            "ability_scores": self.ability_scores.to_dict(),
            "skills": [
                {
                    "name": skill.name,
                    "modifier": skill.modifier,
                    "proficiency": skill.proficiency.value,
                }
                for skill in self.skills
            ],
            "hp": self.hp,
            "ac": self.ac,
            "saves": {
                "fortitude": self.saves.fortitude,
                "reflex": self.saves.reflex,
                "will": self.saves.will,
            },
            "attacks": [
                {
                    "name": attack.name,
                    "attack_bonus": attack.attack_bonus,
                    "damage": attack.damage,
                    "traits": list(attack.traits),
                }
                for attack in self.attacks
            ],
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Npc:
        """Build an NPC from a mapping produced by :meth:`to_dict`.

        Raises ValueError when a field is missing or holds an unknown value.
        """
        try:
            scores = data["ability_scores"]
            saves = data["saves"]
            return cls(
                name=str(data["name"]),
                level=int(data["level"]),
                character_class=CharacterClass(data["class"]),
                ability_scores=AbilityScores(
                    strength=int(scores["strength"]),
                    dexterity=int(scores["dexterity"]),
                    constitution=int(scores["constitution"]),
                    intelligence=int(scores["intelligence"]),
                    wisdom=int(scores["wisdom"]),
                    charisma=int(scores["charisma"]),
                ),
                hp=int(data["hp"]),
                ac=int(data["ac"]),
                saves=Saves(
                    fortitude=int(saves["fortitude"]),
                    reflex=int(saves["reflex"]),
                    will=int(saves["will"]),
                ),
                skills=[
                    Skill(
                        name=str(skill["name"]),
                        modifier=int(skill["modifier"]),
                        proficiency=Proficiency(skill["proficiency"]),
                    )
                    for skill in data["skills"]
                ],
                attacks=[
                    Attack(
                        name=str(attack["name"]),
                        attack_bonus=int(attack["attack_bonus"]),
                        damage=str(attack["damage"]),
                        traits=tuple(str(t) for t in attack["traits"]),
                    )
                    for attack in data["attacks"]
                ],
                description=data.get("description"),
            )
        except KeyError as exc:
            raise ValueError(f"missing field: {exc.args[0]}") from exc
        except TypeError as exc:
            raise ValueError(f"malformed NPC data: {exc}") from exc