# app/core/config.py

import logging
import os
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Petclinic Customers Service"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Owner and Pet entities of the Petclinic customers service"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root log level name (e.g., DEBUG, INFO, WARNING)")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.basicConfig"
    )

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 디버그 모드에서는 로그 레벨을 항상 DEBUG로 올립니다.
        if self.DEBUG_MODE:
            self.LOG_LEVEL = "DEBUG"


settings = Settings()


def configure_logging(config: Optional[Settings] = None) -> int:
    """
    설정값을 기준으로 루트 로거를 초기화하고, 적용된 숫자 로그 레벨을 반환합니다.

    알 수 없는 레벨 이름이면 ValueError를 발생시킵니다.
    """
    config = config or settings
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.LOG_LEVEL}")

    logging.basicConfig(level=level, format=config.LOG_FORMAT)
    logging.getLogger(__name__).debug(f"로깅 초기화 완료: {config.APP_NAME} ({config.APP_ENV}), level={config.LOG_LEVEL}")
    return level
