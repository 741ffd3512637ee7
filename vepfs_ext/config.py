"""
Application Configuration - 配置管理
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """vePFS 扩展客户端配置"""

    # 火山引擎凭证
    volcengine_access_key_id: str = Field(default="", description="Access Key ID")
    volcengine_access_key_secret: str = Field(default="", description="Secret Access Key")
    volcengine_session_token: str = Field(default="", description="STS 临时凭证 Token")
    volcengine_region: str = Field(default="", description="地域，如 cn-beijing")

    # vePFS OpenAPI
    vepfs_endpoint: str = Field(default="open.volcengineapi.com", description="OpenAPI 域名")
    vepfs_scheme: str = Field(default="https", description="请求协议")
    vepfs_api_version: str = Field(default="2022-01-01", description="vePFS API 版本")
    vepfs_service_name: str = Field(default="vepfs", description="签名使用的服务名")

    # 超时配置（秒）
    connection_timeout: int = Field(default=5, description="连接超时")
    socket_timeout: int = Field(default=10, description="读取超时")

    # 日志配置
    log_level: str = Field(default="INFO", description="日志级别")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
