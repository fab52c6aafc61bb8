# 환경변수 로딩 (.env)
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    RECIPE_DIR: str = "recipe"              # 레시피 JSON 폴더 (*.json만 읽음)
    OUTPUT_FILE: str = "Recipes.kt"         # 매 실행마다 덮어씀
    ITEM_NAMESPACE: str = "minecraft:"      # 아이템 id/타입에서 제거할 접두사

    # 생성될 코틀린 파일 레이아웃
    KOTLIN_PACKAGE: str = "com.fracta7.crafter.data.repository"
    RECIPE_MODEL_IMPORT: str = "com.fracta7.crafter.domain.model.Recipe"
    INIT_FUNCTION: str = "recipesInit"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
