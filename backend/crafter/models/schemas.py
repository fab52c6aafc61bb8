# crafter/models/schemas.py
# Pydantic 모델 정의
# NormalizedRecipe: 레시피 1건 해석 결과 (코틀린 Recipe(...) 한 줄에 대응)
# RenderOut: 미리보기 API 응답 (코드 + 건수)
from __future__ import annotations
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

class NormalizedRecipe(BaseModel):
    # 생성 후 변경 금지 (해석 1회 → 출력 1회)
    model_config = ConfigDict(frozen=True)

    result_item: str
    result_quantity: int = Field(default=1, ge=1)
    # 삽입 순서 유지 = 출력 순서
    requirements: Dict[str, int] = Field(default_factory=dict)
    recipe_kind: str

class RenderOut(BaseModel):
    recipes: int
    skipped: int
    code: str
