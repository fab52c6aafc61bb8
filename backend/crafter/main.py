# crafter/main.py
# FastAPI 앱 초기화 및 라우터 설정 (생성 결과 미리보기용)

from __future__ import annotations

from fastapi import FastAPI

from crafter.api.routes_recipes import router as recipes_router

app = FastAPI(title="Crafter Recipe Generator - API", version="0.1.0")

@app.get("/")
async def root():
    return {"status": "ok"}

@app.get("/health")
async def health():
    return {"status": "ok"}

# 라우터 prefix는 각 파일 내에서 정의함
app.include_router(recipes_router)
