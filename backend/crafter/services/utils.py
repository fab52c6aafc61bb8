# crafter/services/utils.py
# 아이템 id 정규화 유틸
# - "minecraft:stick" → "stick" (접두사만 제거, 이미 제거된 id는 그대로)
# - 재료 스펙 {"item": "..."} 만 아이템으로 인정. 태그/대체목록은 None

from __future__ import annotations
from typing import Any, Dict, Optional

from crafter.models.kinds import DEFAULT_NAMESPACE

def strip_namespace(item_id: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    if namespace and item_id.startswith(namespace):
        return item_id[len(namespace):]
    return item_id

def resolve_item(spec: Any, namespace: str = DEFAULT_NAMESPACE) -> Optional[str]:
    # {"item": "minecraft:stick"} → "stick"
    # {"tag": "minecraft:planks"}, [ {...}, {...} ], None → None (요구사항에서 빠질 뿐 오류 아님)
    if not isinstance(spec, dict):
        return None
    item = spec.get("item")
    if not isinstance(item, str):
        return None
    return strip_namespace(item, namespace)

def bump(requirements: Dict[str, int], item_id: Optional[str]) -> None:
    # 같은 재료가 또 나오면 누적 (덮어쓰기 금지)
    if item_id is None:
        return
    requirements[item_id] = requirements.get(item_id, 0) + 1
