# crafter/services/interpreter.py
# 목적: 레시피 JSON 1건 → NormalizedRecipe (결과 아이템, 수량, 재료 요구량, 종류)
# 규칙: type/result.id 를 못 뽑거나 종류별 필수 구조가 없으면 레코드 전체 버림(None)
#       재료 하나가 태그/대체목록이면 그 재료만 빠짐 (레코드는 유지)

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from crafter.models import kinds
from crafter.models.schemas import NormalizedRecipe
from crafter.services.utils import bump, resolve_item, strip_namespace

log = logging.getLogger(__name__)

Requirements = Dict[str, int]
Handler = Callable[[Mapping[str, Any], str], Optional[Requirements]]

# ------------------------------
# 종류별 재료 집계
# ------------------------------

def _shaped(doc: Mapping[str, Any], ns: str) -> Optional[Requirements]:
    key = doc.get("key")
    pattern = doc.get("pattern")
    if not isinstance(key, dict) or not isinstance(pattern, list):
        return None

    reqs: Requirements = {}
    for row in pattern:
        # 문자열이 아닌 행은 빈 행 취급
        for symbol in (row if isinstance(row, str) else ""):
            if symbol in key:
                bump(reqs, resolve_item(key[symbol], ns))
    return reqs

def _shapeless(doc: Mapping[str, Any], ns: str) -> Optional[Requirements]:
    ingredients = doc.get("ingredients")
    if not isinstance(ingredients, list):
        return None

    reqs: Requirements = {}
    for ing in ingredients:
        bump(reqs, resolve_item(ing, ns))
    return reqs

def _single(doc: Mapping[str, Any], ns: str) -> Optional[Requirements]:
    # 캠프파이어/석재절단기: 재료 1개
    reqs: Requirements = {}
    bump(reqs, resolve_item(doc.get("ingredient"), ns))
    return reqs

def _furnace(doc: Mapping[str, Any], ns: str) -> Optional[Requirements]:
    # 화로/용광로/훈연기: 재료 + 연료 1 (재료가 안 풀려도 연료는 항상)
    reqs = _single(doc, ns)
    bump(reqs, kinds.FUEL_KEY)
    return reqs

def _smithing(doc: Mapping[str, Any], ns: str) -> Optional[Requirements]:
    slots = [doc.get(name) for name in kinds.SMITHING_SLOTS]
    if not all(isinstance(s, dict) for s in slots):
        return None

    reqs: Requirements = {}
    for spec in slots:
        bump(reqs, resolve_item(spec, ns))
    return reqs

HANDLERS: Dict[str, Handler] = {
    kinds.CRAFTING_SHAPED: _shaped,
    kinds.CRAFTING_SHAPELESS: _shapeless,
    **{kind: _furnace for kind in kinds.FURNACE_KINDS},
    kinds.CAMPFIRE_COOKING: _single,
    kinds.SMITHING_TRANSFORM: _smithing,
    kinds.STONECUTTING: _single,
}

# ------------------------------
# 공통 필드
# ------------------------------

def _result_quantity(result: Mapping[str, Any]) -> int:
    # count 없음/정수 아님/0 이하 → 1
    count = result.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        return 1
    return count

def parse_recipe(doc: Any, namespace: str = kinds.DEFAULT_NAMESPACE) -> Optional[NormalizedRecipe]:
    """
    레시피 문서(파싱된 JSON) 1건을 정규화한다.
    인식 불가(알 수 없는 type, type/result.id 누락, 종류별 필수 구조 누락)면 None.
    """
    if not isinstance(doc, dict):
        return None

    raw_type = doc.get("type")
    result = doc.get("result")
    if not isinstance(raw_type, str) or not isinstance(result, dict):
        return None
    result_id = result.get("id")
    if not isinstance(result_id, str):
        return None

    kind = strip_namespace(raw_type, namespace)
    handler = HANDLERS.get(kind)
    if handler is None:
        log.debug("unknown recipe type %r", raw_type)
        return None

    requirements = handler(doc, namespace)
    if requirements is None:
        log.debug("malformed %s recipe for %r", kind, result_id)
        return None

    return NormalizedRecipe(
        result_item=strip_namespace(result_id, namespace),
        result_quantity=_result_quantity(result),
        requirements=requirements,
        recipe_kind=kind,
    )
