"""Browser front end: a form that generates NPCs and shows their stat block."""

from __future__ import annotations

import argparse
import logging
from functools import partial
from html import escape
from typing import Callable, Mapping

from flask import Flask, request

from .generator import MIN_LEVEL, class_label, generate_npc, parse_class, parse_level
from .ollama import DEFAULT_URL, DescriptionError, generate_description
from .types import Npc

log = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Generate an NPC to see their stats"
PENDING_DESCRIPTION = "Generating description..."
FAILED_DESCRIPTION = "Failed to generate description."
CLASS_OPTIONS = ("Fighter", "Rogue", "Wizard", "Cleric")

Describe = Callable[[Npc], str]

_INK = "#1c2c1f"
_PARCHMENT = "#f4e4bc"
_PAPER = "#fff9e6"
_FONT = "'IM Fell English', serif"
_LINE = f"2px solid {_INK}"
_THIN_LINE = f"1px solid {_INK}"
_FLOURISH = (
    "url(\"data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='100' height='10' viewBox='0 0 100 10'%3E%3Cpath fill='none' "
    "stroke='%231c2c1f' stroke-width='1' "
    "d='M0,5 C25,0 75,10 100,5 M20,5 C40,0 60,10 80,5'/%3E%3C/svg%3E\")"
)

Rule = tuple[str, dict[str, str]]


def _px(value: int) -> str:
    return f"{value}px"


def _frame(selector: str, outer: int, inner: int) -> list[Rule]:
    """Two pseudo-element rules drawing the doubled border around a box."""
    common = {"content": "''", "position": "absolute"}
    vertical = {
        **common,
        "top": _px(-outer),
        "bottom": _px(-outer),
        "left": _px(inner),
        "right": _px(inner),
        "border-left": _LINE,
        "border-right": _LINE,
    }
    horizontal = {
        **common,
        "top": _px(inner),
        "bottom": _px(inner),
        "left": _px(-outer),
        "right": _px(-outer),
        "border-top": _LINE,
        "border-bottom": _LINE,
    }
    return [(f"{selector}::before", vertical), (f"{selector}::after", horizontal)]


def _panel(selector: str, spacing: str) -> list[Rule]:
    """A framed paper panel with 20px spacing on the given side."""
    box = {
        "background-color": _PAPER,
        "padding": "20px",
        spacing: "20px",
        "border": _LINE,
        "position": "relative",
    }
    return [(selector, box), *_frame(selector, 10, 5)]


def _build_rules() -> list[Rule]:
    layered = {"position": "relative", "z-index": "1"}
    return [
        (
            ".pf2e-page",
            {
                "max-width": "1000px",
                "margin": "40px auto",
                "padding": "40px",
                "background-color": _PARCHMENT,
                "position": "relative",
                "border": _LINE,
            },
        ),
        *_frame(".pf2e-page", 20, 10),
        *_panel(".form-container", "margin-bottom"),
        (
            "h1",
            {
                "color": _INK,
                "font-size": "2.5em",
                "text-align": "left",
                "font-family": _FONT,
                "margin-bottom": "30px",
                "position": "relative",
                "padding-bottom": "15px",
            },
        ),
        (
            "h1::after",
            {
                "content": "''",
                "position": "absolute",
                "bottom": "0",
                "left": "0",
                "right": "0",
                "height": "10px",
                "background-image": _FLOURISH,
                "background-repeat": "repeat-x",
                "background-size": "100px 10px",
                "pointer-events": "none",
            },
        ),
        (
            ".form-group",
            {
                "display": "flex",
                "align-items": "center",
                "gap": "1rem",
                "margin-bottom": "1rem",
                **layered,
            },
        ),
        (
            "label",
            {
                "min-width": "100px",
                "font-family": _FONT,
                "font-size": "1.2em",
                "color": _INK,
            },
        ),
        (
            "input, select",
            {
                "padding": "8px",
                "border": _THIN_LINE,
                "background-color": "#fff",
                "font-family": _FONT,
                "flex": "1",
            },
        ),
        (
            "button",
            {
                "padding": "10px 20px",
                "background-color": _INK,
                "color": _PARCHMENT,
                "border": "none",
                "cursor": "pointer",
                "font-family": _FONT,
                "font-size": "1.1em",
                **layered,
            },
        ),
        *_panel(".statblock", "margin-top"),
        (
            ".stat-group",
            {
                "display": "grid",
                "grid-template-columns": "repeat(auto-fit, minmax(150px, 1fr))",
                "gap": "10px",
                "margin": "10px 0",
                **layered,
            },
        ),
        (
            ".stat-item",
            {
                "background-color": _PARCHMENT,
                "padding": "8px 12px",
                "text-align": "center",
                "border": _THIN_LINE,
            },
        ),
    ]


def _render_rule(selector: str, declarations: dict[str, str]) -> str:
    body = "\n".join(f"    {name}: {value};" for name, value in declarations.items())
    return f"{selector} {{\n{body}\n}}"


_STYLES = "\n" + "\n\n".join(_render_rule(*rule) for rule in _build_rules()) + "\n"


def get_styles() -> str:
    """Return the page style sheet."""
    return _STYLES


def _stat_group(items: list[str]) -> str:
    cells = "".join(f'<div class="stat-item">{escape(item)}</div>' for item in items)
    return f'<div class="stat-group">{cells}</div>'


def _render_statblock(npc: Npc, description: str | None) -> str:
    scores = npc.ability_scores
    saves = npc.saves
    text = description if description is not None else PENDING_DESCRIPTION
    return (
        '<div class="statblock">'
        f"<h2>{escape(npc.name)}</h2>"
        f"<p>{escape(f'Level {npc.level} {class_label(npc.character_class)}')}</p>"
        "<h3>Ability Scores</h3>"
        + _stat_group(
            [
                f"STR: {scores.strength}",
                f"DEX: {scores.dexterity}",
                f"CON: {scores.constitution}",
                f"INT: {scores.intelligence}",
                f"WIS: {scores.wisdom}",
                f"CHA: {scores.charisma}",
            ]
        )
        + _stat_group([f"HP: {npc.hp}", f"AC: {npc.ac}"])
        + "<h3>Saves</h3>"
        + _stat_group(
            [
                f"Fort: +{saves.fortitude}",
                f"Ref: +{saves.reflex}",
                f"Will: +{saves.will}",
            ]
        )
        + "<h3>Description</h3>"
        + f"<p>{escape(text)}</p>"
        + "</div>"
    )


def render_page(
    form: Mapping[str, object] | None = None,
    npc: Npc | None = None,
    description: str | None = None,
) -> str:
    """Render the generator page with the current form values and stat block."""
    form = form or {}
    name = str(form.get("name", ""))
    level = str(form.get("level", MIN_LEVEL))
    selected = str(form.get("class", CLASS_OPTIONS[0]))
    options = "".join(
        f'<option value="{option}"{" selected" if option == selected else ""}>{option}</option>'
        for option in CLASS_OPTIONS
    )
    result = _render_statblock(npc, description) if npc is not None else f"<p>{PLACEHOLDER_TEXT}</p>"
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8"><title>NPC Generator</title>'
        f"<style>{get_styles()}</style></head><body>"
        '<div class="pf2e-page">'
        "<h1>Chapter 1: NPC Generator</h1>"
        '<form class="form-container" method="post" action="/">'
        '<div class="form-group"><label for="name">NPC Name</label>'
        f'<input type="text" id="name" name="name" value="{escape(name)}"></div>'
        '<div class="form-group"><label for="level">Level</label>'
        f'<input type="number" id="level" name="level" min="1" max="20" value="{escape(level)}"></div>'
        '<div class="form-group"><label for="class">Class</label>'
        f'<select id="class" name="class">{options}</select></div>'
        '<button type="submit">Generate NPC</button>'
        "</form>"
        f"{result}"
        "</div></body></html>"
    )


def _describe_safely(describe: Describe, npc: Npc) -> str:
    try:
        return describe(npc)
    except DescriptionError as exc:
        log.error("Error generating description: %s", exc)
        return FAILED_DESCRIPTION


def create_app(describe: Describe | None = None) -> Flask:
    """Build the front-end application; ``describe`` turns an NPC into prose."""
    describer: Describe = describe if describe is not None else generate_description
    app = Flask(__name__)

    @app.get("/")
    def index() -> str:
        return render_page()

    @app.post("/")
    def generate() -> str:
        name = request.form.get("name", "")
        level = parse_level(request.form.get("level", "").strip()) or MIN_LEVEL
        class_text = request.form.get("class", CLASS_OPTIONS[0])
        npc = generate_npc(name, level, parse_class(class_text))
        description = _describe_safely(describer, npc)
        npc.description = description
        form = {"name": name, "level": level, "class": class_text}
        return render_page(form, npc, description)

    return app


def main(argv: list[str] | None = None) -> None:
    """Run the front-end web server."""
    parser = argparse.ArgumentParser(description="Serve the NPC generator page.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--proxy-url", default=DEFAULT_URL)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    app = create_app(partial(generate_description, url=args.proxy_url))
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()