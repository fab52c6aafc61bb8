# crafter/models/kinds.py
from typing import FrozenSet

# === 레시피 종류(type 태그, 네임스페이스 제거 후) ==============================
CRAFTING_SHAPED = "crafting_shaped"
CRAFTING_SHAPELESS = "crafting_shapeless"
SMELTING = "smelting"
BLASTING = "blasting"
SMOKING = "smoking"
CAMPFIRE_COOKING = "campfire_cooking"
SMITHING_TRANSFORM = "smithing_transform"
STONECUTTING = "stonecutting"

# 화로 계열: 연료가 항상 1 필요 (어떤 연료인지는 플레이어 선택이라 기록에 없음)
FURNACE_KINDS: FrozenSet[str] = frozenset({SMELTING, BLASTING, SMOKING})

KNOWN_KINDS: FrozenSet[str] = frozenset({
    CRAFTING_SHAPED,
    CRAFTING_SHAPELESS,
    *FURNACE_KINDS,
    CAMPFIRE_COOKING,
    SMITHING_TRANSFORM,
    STONECUTTING,
})

FUEL_KEY = "fuel"
DEFAULT_NAMESPACE = "minecraft:"

# 대장장이 변환 레시피 슬롯 (입력 순서 = 요구사항 순서)
SMITHING_SLOTS = ("addition", "base", "template")