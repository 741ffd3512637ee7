"""
Exceptions - 异常定义

请求发送阶段的错误（网络错误、非 2xx 响应、响应解析失败）直接向上抛出
传输层原始异常，这里只定义客户端初始化阶段的异常。
"""

from typing import Optional


class AppException(Exception):
    """应用自定义异常基类"""
    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        detail: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class ConfigurationException(AppException):
    """配置异常（凭证缺失、客户端初始化失败）"""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            detail=detail,
        )
