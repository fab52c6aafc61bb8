# crafter/api/routes_recipes.py
# 레시피 JSON 미리보기 — 해석 결과/생성될 코틀린 코드를 파일 쓰기 없이 확인

from __future__ import annotations
from typing import Any, Dict, List
import logging
from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from crafter.core.config import Settings
from crafter.core.deps import get_settings
from crafter.models.schemas import NormalizedRecipe, RenderOut
from crafter.services.emitter import render_kotlin
from crafter.services.interpreter import parse_recipe
from crafter.services.loader import RecipeSourceError, interpret_documents, load_recipes

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])

@router.post("/interpret", response_model=NormalizedRecipe)
async def interpret(
    doc: Dict[str, Any] = Body(...),
    cfg: Settings = Depends(get_settings),
):
    # 레시피 1건 → 정규화 결과. 인식 불가면 422
    recipe = parse_recipe(doc, cfg.ITEM_NAMESPACE)
    if recipe is None:
        raise HTTPException(status_code=422, detail="unrecognized recipe")
    return recipe

@router.post("/render", response_model=RenderOut)
async def render(
    docs: List[Any] = Body(...),
    cfg: Settings = Depends(get_settings),
):
    # 레시피 여러 건 → 코틀린 코드 (버린 건수 포함)
    recipes, skipped = interpret_documents(docs, cfg.ITEM_NAMESPACE)
    return RenderOut(recipes=len(recipes), skipped=skipped, code=render_kotlin(recipes, cfg))

@router.get("/generated", response_class=PlainTextResponse)
async def generated(cfg: Settings = Depends(get_settings)):
    # 설정된 RECIPE_DIR 기준으로 생성 결과 미리보기
    try:
        recipes = load_recipes(cfg.RECIPE_DIR, cfg.ITEM_NAMESPACE)
    except RecipeSourceError as e:
        log.exception("recipe source failed")
        raise HTTPException(status_code=500, detail=str(e))
    return PlainTextResponse(render_kotlin(recipes, cfg))
