# tests/test_loader.py
import logging
import os

import pytest

from crafter.services.loader import (
    RecipeSourceError,
    interpret_documents,
    list_recipe_files,
    load_recipes,
)

def test_only_json_files_in_sorted_order(recipe_dir, write_recipe, ladder, iron_ingot):
    write_recipe("b_iron.json", iron_ingot)
    write_recipe("a_ladder.json", ladder)
    write_recipe("notes.txt", "not a recipe")
    (recipe_dir / "nested.json").mkdir()

    files = list_recipe_files(str(recipe_dir))
    assert [os.path.basename(p) for p in files] == ["a_ladder.json", "b_iron.json"]

    recipes = load_recipes(str(recipe_dir))
    assert [r.result_item for r in recipes] == ["ladder", "iron_ingot"]

def test_unrecognized_records_are_skipped(recipe_dir, write_recipe, iron_ingot, caplog):
    write_recipe("a.json", {"type": "minecraft:unknown_kind", "result": {"id": "minecraft:x"}})
    write_recipe("b.json", iron_ingot)
    write_recipe("c.json", {"type": "minecraft:smelting"})
    write_recipe("d.json", [1, 2])

    with caplog.at_level(logging.INFO, logger="crafter.services.loader"):
        recipes = load_recipes(str(recipe_dir))
    assert len(recipes) == 1
    assert recipes[0].requirements == {"iron_ore": 1, "fuel": 1}
    assert "kept=1 skipped=3" in caplog.text

def test_empty_directory(recipe_dir):
    assert load_recipes(str(recipe_dir)) == []

def test_missing_directory_is_fatal(tmp_path):
    with pytest.raises(RecipeSourceError) as exc:
        load_recipes(str(tmp_path / "nope"))
    assert exc.value.path == str(tmp_path / "nope")

def test_invalid_json_is_fatal(recipe_dir, write_recipe, iron_ingot):
    write_recipe("a.json", iron_ingot)
    bad = write_recipe("b.json", "{ not json")
    with pytest.raises(RecipeSourceError) as exc:
        load_recipes(str(recipe_dir))
    assert exc.value.path == str(bad)
    assert "invalid JSON" in str(exc.value)

def test_interpret_documents_counts_skips(ladder):
    recipes, skipped = interpret_documents([ladder, {}, "x", ladder])
    assert len(recipes) == 2
    assert skipped == 2
