# 读取 .env 配置
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sensitive.censor.noise import DEFAULT_NOISE_PATTERN, compile_noise_pattern


class Settings(BaseSettings):
    APP_NAME: str = "Sensitive Filter Service"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # Database（词库持久化）
    DATABASE_URL: str = "sqlite:///./sensitive.db"

    # Matching
    NOISE_PATTERN: str = DEFAULT_NOISE_PATTERN
    MASK_CHAR: str = "*"
    WORD_DICT_PATH: str = ""  # 启动时额外加载的词库文件，留空则不加载

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # 忽略多余的环境变量
    )

    @field_validator("NOISE_PATTERN")
    @classmethod
    def _check_noise_pattern(cls, value: str) -> str:
        compile_noise_pattern(value)
        return value

    @field_validator("MASK_CHAR")
    @classmethod
    def _check_mask_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("MASK_CHAR 必须是单个字符")
        return value


settings = Settings()
