import re

import pytest

from npcforge.generator import build_npc
from npcforge.ollama import DescriptionError
from npcforge.types import AbilityScores, CharacterClass, Npc
from npcforge.web import create_app, get_styles, render_page


@pytest.fixture
def scores():
    return AbilityScores(12, 14, 16, 10, 13, 11)


class _Recorder:
    def __init__(self, text="A sly figure."):
        self.text = text
        self.seen: list[Npc] = []

    def __call__(self, npc):
        self.seen.append(npc)
        return self.text


def _failing(npc):
    raise DescriptionError("boom")


def test_styles_contain_page_rules():
    css = get_styles()
    assert ".pf2e-page" in css
    assert "#f4e4bc" in css
    assert ".stat-item" in css


def test_render_without_npc_shows_placeholder():
    page = render_page()
    assert "Generate an NPC to see their stats" in page
    assert "statblock" not in page.split("</style>")[1]
    assert "Chapter 1: NPC Generator" in page


def test_render_with_npc_shows_stats(scores):
    npc = build_npc("Mira", 3, CharacterClass.WIZARD, scores)
    page = render_page({"name": "Mira", "level": 3, "class": "Wizard"}, npc, "Tall.")
    assert "Level 3 Wizard" in page
    assert f"HP: {npc.hp}" in page
    assert f"AC: {npc.ac}" in page
    assert f"Fort: +{npc.saves.fortitude}" in page
    assert f"Will: +{npc.saves.will}" in page
    assert f"STR: {scores.strength}" in page
    assert "<p>Tall.</p>" in page


def test_render_pending_description(scores):
    npc = build_npc("Mira", 1, None, scores)
    page = render_page(None, npc, None)
    assert "Generating description..." in page


def test_render_unlabelled_class(scores):
    npc = build_npc("Aldo", 2, CharacterClass.CLERIC, scores)
    assert "Level 2 Unknown Class" in render_page(None, npc, "x")


def test_render_escapes_name(scores):
    npc = build_npc("<b>", 1, None, scores)
    page = render_page({"name": "<b>"}, npc, "x")
    assert "&lt;b&gt;" in page
    assert "<h2><b></h2>" not in page


def test_render_marks_selected_class():
    page = render_page({"class": "Rogue"})
    assert '<option value="Rogue" selected>' in page


def test_get_index():
    client = create_app(_Recorder()).test_client()
    response = client.get("/")
    assert response.status_code == 200
    assert "Generate an NPC to see their stats" in response.get_data(as_text=True)


def test_post_generates_npc():
    recorder = _Recorder()
    client = create_app(recorder).test_client()
    response = client.post("/", data={"name": "Vex", "level": "5", "class": "Rogue"})
    page = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Level 5 Rogue" in page
    assert "A sly figure." in page
    assert len(recorder.seen) == 1
    npc = recorder.seen[0]
    assert npc.name == "Vex"
    assert npc.level == 5
    assert f"HP: {npc.hp}" in page
    for value in npc.ability_scores.to_dict().values():
        assert 10 <= value <= 18


def test_post_description_failure():
    client = create_app(_failing).test_client()
    page = client.post("/", data={"name": "Vex", "level": "2", "class": "Wizard"}).get_data(
        as_text=True
    )
    assert "Failed to generate description." in page


def test_post_invalid_level_and_class_fall_back():
    recorder = _Recorder()
    client = create_app(recorder).test_client()
    page = client.post("/", data={"name": "Bo", "level": "25", "class": "Cleric"}).get_data(
        as_text=True
    )
    npc = recorder.seen[0]
    assert npc.level == 1
    assert npc.character_class is CharacterClass.FIGHTER
    assert "Level 1 Fighter" in page
    assert re.search(r"HP: \d+", page)