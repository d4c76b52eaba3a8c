"""Random NPC generation and form input handling."""

from __future__ import annotations

import random
import re

from .types import AbilityScores, CharacterClass, Npc, Saves

MIN_LEVEL = 1
MAX_LEVEL = 20
MIN_SCORE = 10
MAX_SCORE = 18
DEFAULT_CLASS = CharacterClass.FIGHTER

_SELECTABLE_CLASSES = {
    "Fighter": CharacterClass.FIGHTER,
    "Rogue": CharacterClass.ROGUE,
    "Wizard": CharacterClass.WIZARD,
}

_LABELLED_CLASSES = frozenset(_SELECTABLE_CLASSES.values())

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _div_trunc(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def modifier(score: int) -> int:
    """Ability modifier of a score, rounding toward zero."""
    return _div_trunc(score - 10, 2)


def roll_ability_scores(rng: random.Random | None = None) -> AbilityScores:
    """Roll each ability score uniformly from the inclusive score range."""
    rng = rng or random.Random()
    rolls = [rng.randint(MIN_SCORE, MAX_SCORE) for _ in range(6)]
    return AbilityScores(*rolls)


def base_hp(character_class: CharacterClass) -> int:
    """Hit points per level granted by a class."""
    if character_class in (CharacterClass.FIGHTER, CharacterClass.BARBARIAN):
        return 10
    if character_class in (CharacterClass.WIZARD, CharacterClass.SORCERER):
        return 6
    return 8


def build_npc(
    name: str,
    level: int,
    character_class: CharacterClass | None,
    ability_scores: AbilityScores,
) -> Npc:
    """Derive a full stat block from a level, class and ability scores."""
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")
    chosen = character_class or DEFAULT_CLASS
    return Npc(
        name=name,
        level=level,
        character_class=chosen,
        ability_scores=ability_scores,
        hp=base_hp(chosen) * level + ability_scores.constitution,
        ac=10 + _div_trunc(level, 2) + modifier(ability_scores.dexterity),
        saves=Saves(
            fortitude=2 + level + modifier(ability_scores.constitution),
            reflex=2 + level + modifier(ability_scores.dexterity),
            will=2 + level + modifier(ability_scores.wisdom),
        ),
    )


def generate_npc(
    name: str,
    level: int,
    character_class: CharacterClass | None = None,
    rng: random.Random | None = None,
) -> Npc:
    """Roll ability scores and build an NPC from them."""
    return build_npc(name, level, character_class, roll_ability_scores(rng))


def parse_level(text: str) -> int | None:
    """Parse a level field; None when it is not an integer in range."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if MIN_LEVEL <= value <= MAX_LEVEL else None


def parse_class(text: str) -> CharacterClass | None:
    """Map a class selector value to a class; None when not selectable."""
    return _SELECTABLE_CLASSES.get(text)


def class_label(character_class: CharacterClass) -> str:
    """Display label for a class in the stat block."""
    if character_class in _LABELLED_CLASSES:
        return character_class.value
    return "Unknown Class"