import os
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional, List

class Settings(BaseSettings):
    """应用配置"""

    # 应用配置
    APP_NAME: str = "日语英译练习服务"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENV: str = "development"

    # 服务配置
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # 数据库配置
    # DATABASE_URL 优先；未设置时由 DB_* 拼出 MySQL 连接串
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_ENDPOINT: Optional[str] = None
    DB_NAME: Optional[str] = None

    # 练习配置
    MASTERY_THRESHOLD: int = 2
    SEED_SAMPLE_DATA: bool = True

    # CORS配置
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    LOG_DIR: str = "logs"

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    def get_database_url(self) -> str:
        """
        获取数据库连接串

        Returns:
            str: SQLAlchemy数据库URL

        Raises:
            ValueError: 既没有DATABASE_URL也没有完整的DB_*配置
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if not all([self.DB_USER, self.DB_PASSWORD, self.DB_ENDPOINT, self.DB_NAME]):
            raise ValueError(
                "数据库配置缺失，请设置 DATABASE_URL 或 DB_USER、DB_NAME、DB_PASSWORD、DB_ENDPOINT"
            )
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_ENDPOINT}/{self.DB_NAME}"

# 创建全局配置实例，生产环境不读取 .env 文件
settings = Settings(_env_file=None if os.getenv("ENV") == "production" else ".env")
