# crafter/services/loader.py
# 목적: 레시피 폴더(*.json) 읽기 → 문서별 해석 → 살아남은 레시피 목록
# 오류: 폴더/파일 읽기 실패, JSON 파싱 실패는 RecipeSourceError로 전체 중단
#       해석 불가 레코드는 건너뜀(debug 로그만)

from __future__ import annotations
import json
import logging
import os
from typing import Any, Iterable, List, Tuple

from crafter.models.kinds import DEFAULT_NAMESPACE
from crafter.models.schemas import NormalizedRecipe
from crafter.services.interpreter import parse_recipe

log = logging.getLogger(__name__)

RECIPE_EXT = ".json"

class RecipeSourceError(RuntimeError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path

def list_recipe_files(recipe_dir: str) -> List[str]:
    # 파일명 정렬 → 플랫폼 상관없이 같은 출력 순서
    try:
        names = sorted(os.listdir(recipe_dir))
    except OSError as e:
        raise RecipeSourceError(recipe_dir, f"cannot read recipe directory ({e})") from e

    out: List[str] = []
    for name in names:
        path = os.path.join(recipe_dir, name)
        if name.endswith(RECIPE_EXT) and os.path.isfile(path):
            out.append(path)
    return out

def load_document(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise RecipeSourceError(path, f"invalid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeSourceError(path, f"cannot read file ({e})") from e

def interpret_documents(docs: Iterable[Any], namespace: str = DEFAULT_NAMESPACE) -> Tuple[List[NormalizedRecipe], int]:
    # (살아남은 레시피, 버린 개수)
    recipes: List[NormalizedRecipe] = []
    skipped = 0
    for doc in docs:
        recipe = parse_recipe(doc, namespace)
        if recipe is None:
            skipped += 1
            continue
        recipes.append(recipe)
    return recipes, skipped

def load_recipes(recipe_dir: str, namespace: str = DEFAULT_NAMESPACE) -> List[NormalizedRecipe]:
    """
    폴더 안 레시피를 전부 읽어 정규화한다. 하나라도 읽기/파싱이 안 되면 예외.
    모든 파일을 다 읽은 뒤에 해석하므로 중간 실패 시 부분 결과는 없다.
    """
    paths = list_recipe_files(recipe_dir)
    docs = [load_document(p) for p in paths]
    recipes, skipped = interpret_documents(docs, namespace)
    log.info("recipes: files=%d kept=%d skipped=%d (%s)", len(paths), len(recipes), skipped, recipe_dir)
    return recipes
