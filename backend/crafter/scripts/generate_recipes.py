# crafter/scripts/generate_recipes.py
# 사용: python -m crafter.scripts.generate_recipes  (또는 crafter-generate)
# 설정: RECIPE_DIR / OUTPUT_FILE / KOTLIN_PACKAGE ... (.env 또는 환경변수)
import logging
import sys
from typing import Optional

from crafter.core.config import Settings, settings as default_settings
from crafter.services.emitter import render_kotlin
from crafter.services.loader import RecipeSourceError, load_recipes

log = logging.getLogger(__name__)

DONE_MESSAGE = "Kotlin file generated successfully."

def write_output(path: str, code: str) -> None:
    # 한 번에 덮어쓰기
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(code)
    except OSError as e:
        raise RecipeSourceError(path, f"cannot write output ({e})") from e

def main(settings: Optional[Settings] = None) -> int:
    cfg = settings or default_settings
    logging.basicConfig(
        level=getattr(logging, cfg.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        recipes = load_recipes(cfg.RECIPE_DIR, cfg.ITEM_NAMESPACE)
        write_output(cfg.OUTPUT_FILE, render_kotlin(recipes, cfg))
    except RecipeSourceError as e:
        log.error("generation failed: %s", e)
        return 1

    print(DONE_MESSAGE)
    return 0

if __name__ == "__main__":
    sys.exit(main())
