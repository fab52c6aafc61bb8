# 공용 의존성/헬퍼 (설정 주입)
from crafter.core.config import Settings, settings

def get_settings() -> Settings:
    # 라우터에서 Depends로 받음. 테스트는 dependency_overrides로 교체
    return settings
