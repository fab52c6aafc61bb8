# tests/conftest.py
import json

import pytest

from crafter.core.config import Settings

LADDER = {
    "type": "minecraft:crafting_shaped",
    "pattern": ["A A", "AAA", "A A"],
    "key": {"A": {"item": "minecraft:stick"}},
    "result": {"id": "minecraft:ladder", "count": 3},
}

IRON_INGOT = {
    "type": "minecraft:smelting",
    "ingredient": {"item": "minecraft:iron_ore"},
    "result": {"id": "minecraft:iron_ingot"},
}

@pytest.fixture
def recipe_dir(tmp_path):
    d = tmp_path / "recipe"
    d.mkdir()
    return d

@pytest.fixture
def write_recipe(recipe_dir):
    def _write(name, doc):
        path = recipe_dir / name
        text = doc if isinstance(doc, str) else json.dumps(doc)
        path.write_text(text, encoding="utf-8")
        return path
    return _write

@pytest.fixture
def settings(tmp_path, recipe_dir):
    return Settings(
        RECIPE_DIR=str(recipe_dir),
        OUTPUT_FILE=str(tmp_path / "Recipes.kt"),
    )

@pytest.fixture
def ladder():
    return json.loads(json.dumps(LADDER))

@pytest.fixture
def iron_ingot():
    return json.loads(json.dumps(IRON_INGOT))
