import json

import pytest

from npcforge.types import (
    AbilityScores,
    Attack,
    CharacterClass,
    Npc,
    Proficiency,
    Saves,
    Skill,
)


def _scores():
    return AbilityScores(
        strength=12, dexterity=14, constitution=16,
        intelligence=10, wisdom=11, charisma=13,
    )


def _npc(**overrides):
    values = dict(
        name="Valeros",
        level=4,
        character_class=CharacterClass.WIZARD,
        ability_scores=_scores(),
        hp=40,
        ac=14,
        saves=Saves(fortitude=9, reflex=8, will=6),
    )
    values.update(overrides)
    return Npc(**values)


def test_ability_scores_to_dict_order_and_values():
    data = _scores().to_dict()
    assert list(data) == [
        "strength", "dexterity", "constitution",
        "intelligence", "wisdom", "charisma",
    ]
    assert data["dexterity"] == 14
    assert data["charisma"] == 13


def test_npc_to_dict_uses_variant_name_for_class():
    data = _npc().to_dict()
    assert data["class"] == "Wizard"
    assert data["description"] is None
    assert data["skills"] == []
    assert data["attacks"] == []


def test_npc_round_trip_through_json():
    npc = _npc(
        skills=[Skill(name="Arcana", modifier=7, proficiency=Proficiency.EXPERT)],
        attacks=[Attack(name="Staff", attack_bonus=5, damage="1d4", traits=("two-hand",))],
        description="A scholar.",
    )
    restored = Npc.from_dict(json.loads(json.dumps(npc.to_dict())))
    assert restored == npc


def test_proficiency_serialised_by_name():
    npc = _npc(skills=[Skill(name="Stealth", modifier=3, proficiency=Proficiency.LEGENDARY)])
    assert npc.to_dict()["skills"][0]["proficiency"] == "Legendary"


def test_from_dict_unknown_class_raises():
    data = _npc().to_dict()
    data["class"] = "Gunslinger"
    with pytest.raises(ValueError):
        Npc.from_dict(data)


def test_from_dict_missing_field_raises():
    data = _npc().to_dict()
    del data["saves"]
    with pytest.raises(ValueError, match="saves"):
        Npc.from_dict(data)


def test_class_str_is_variant_name():
    assert str(CharacterClass.SORCERER) == "Sorcerer"
    assert CharacterClass("Barbarian") is CharacterClass.BARBARIAN