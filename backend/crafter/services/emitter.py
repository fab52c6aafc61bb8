# crafter/services/emitter.py
# 목적: NormalizedRecipe 목록 → 코틀린 소스 문자열 (파일 쓰기는 호출자 몫)
# 순서: 입력 순서 그대로, 중복 제거/정렬 없음

from __future__ import annotations
from typing import Iterable, List, Optional

from crafter.core.config import Settings, settings as default_settings
from crafter.models.schemas import NormalizedRecipe

INDENT = "    "

def kotlin_string(value: str) -> str:
    # 코틀린 문자열 리터럴 ("..."), $는 템플릿으로 해석되므로 이스케이프
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
    )
    return f'"{escaped}"'

def render_requirements(recipe: NormalizedRecipe) -> str:
    # mapOf("stick" to 8, "fuel" to 1)
    pairs = ", ".join(f"{kotlin_string(item)} to {qty}" for item, qty in recipe.requirements.items())
    return f"mapOf({pairs})"

def render_entry(recipe: NormalizedRecipe) -> str:
    return (
        f"Recipe(result = {kotlin_string(recipe.result_item)}, "
        f"resultQuantity = {recipe.result_quantity}, "
        f"requirements = {render_requirements(recipe)}, "
        f"recipeType = {kotlin_string(recipe.recipe_kind)}),"
    )

def render_kotlin(recipes: Iterable[NormalizedRecipe], settings: Optional[Settings] = None) -> str:
    """
    전체 레시피를 `fun recipesInit(): List<Recipe>` 하나로 감싼 코틀린 파일 내용을 만든다.
    레시피가 없어도 선언은 그대로 나온다(빈 listOf).
    """
    cfg = settings or default_settings
    lines: List[str] = [
        f"package {cfg.KOTLIN_PACKAGE}",
        "",
        f"import {cfg.RECIPE_MODEL_IMPORT}",
        "",
        "/**",
        " * Initiates all recipes",
        " * @return List of Recipes.",
        " */",
        f"fun {cfg.INIT_FUNCTION}(): List<Recipe> {{",
        f"{INDENT}return listOf(",
    ]
    for recipe in recipes:
        lines.append(INDENT * 2 + render_entry(recipe))
    lines.append(f"{INDENT})")
    lines.append("}")
    return "\n".join(lines) + "\n"
