# npcforge

A small Pathfinder 2e NPC generator. Pick a name, a level (1–20) and a class;
npcforge rolls ability scores and works out hit points, armour class and
saving throws, then asks a local Ollama server for a short description of
the character.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

npcforge has two commands: a web page and a proxy that forwards generation
requests to Ollama.

1. Start Ollama locally with the `llama2` model installed. It listens on
   `http://localhost:11434`.
2. Start the proxy. By default it listens on `http://127.0.0.1:3000` and
   forwards `POST /api/generate` to `http://localhost:11434/api/generate`:

   ```
   npcforge-proxy
   ```

   Options: `--host`, `--port`, `--upstream`. Every response carries
   permissive CORS headers. The proxy answers 415 when the body is not sent
   as JSON, 400 when it cannot be parsed, 502 when Ollama cannot be reached
   or returns an error status, and 500 when Ollama's reply is not JSON.

3. Start the web page (default `http://127.0.0.1:8080`) and open it in a
   browser:

   ```
   npcforge
   ```

   Options: `--host`, `--port`, `--proxy-url` (default
   `http://localhost:3000/api/generate`).

Fill in the form and press **Generate NPC**. The page waits for the
description and then shows the stat block: the rolled scores, HP, AC, saves
and the description. If the proxy or Ollama cannot be reached, the error is
logged and the description reads "Failed to generate description."

The class selector offers Fighter, Rogue, Wizard and Cleric; only Fighter,
Rogue and Wizard are recognised, and any other choice is generated as a
Fighter. A level that is not a whole number from 1 to 20 falls back to 1.

## How the numbers are worked out

- Each ability score is rolled uniformly from 10 to 18.
- Base HP per level is 10 for Fighters and Barbarians, 6 for Wizards and
  Sorcerers, and 8 for every other class. HP = base × level + Constitution.
- AC = 10 + level / 2 + Dexterity modifier.
- Fortitude, Reflex and Will = 2 + level + the Constitution, Dexterity and
  Wisdom modifier respectively.

A modifier is `(score - 10) / 2`, rounded toward zero.

## Using it from Python

```python
import random

from npcforge.generator import generate_npc
from npcforge.ollama import DescriptionError, generate_description
from npcforge.types import CharacterClass

npc = generate_npc("Ari", 5, CharacterClass.WIZARD, random.Random(1))
print(npc.hp, npc.ac, npc.saves.will)

try:
    print(generate_description(npc))
except DescriptionError as exc:
    print("no description:", exc)
```

- `npcforge.types` holds the data model (`Npc`, `AbilityScores`, `Saves`,
  `Skill`, `Attack`, `CharacterClass`, `Proficiency`). `Npc.to_dict()` and
  `Npc.from_dict()` convert a stat block to and from a JSON-compatible
  mapping; `from_dict` raises `ValueError` on missing or unknown values.
- `npcforge.generator` provides `generate_npc`, `build_npc` (which raises
  `ValueError` for a level outside 1–20), `roll_ability_scores`, `modifier`,
  `base_hp`, and the form helpers `parse_level`, `parse_class` and
  `class_label`.
- `npcforge.ollama` provides `build_prompt`, `build_request` and
  `generate_description`, which raises `DescriptionError` when the request
  fails or the reply cannot be read.
- `npcforge.proxy.create_app()` and `npcforge.web.create_app()` return Flask
  applications, so either can be served with any WSGI server.
  `npcforge.web.render_page()` renders the page as a string.

## What it does not do

Skills and attacks are part of the data model, but the generator leaves both
lists empty. NPCs are not saved anywhere; each one exists only on the page
that shows it.