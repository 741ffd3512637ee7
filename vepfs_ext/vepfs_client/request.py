"""
Lens Task Request - 请求句柄

请求的构建与发送分为两步：create_lens_task_inner 返回未发送的句柄，
调用方可以在 send() 之前检查或修改请求头。
"""

from typing import Any, Dict, MutableMapping

from pydantic import BaseModel, Field
from volcengine.auth.SignerV4 import SignerV4

from ..schemas import CreateLensTaskRequest, CreateLensTaskResponse


class Operation(BaseModel):
    """OpenAPI 操作描述"""

    name: str = Field(..., description="Action 名称")
    http_method: str = Field(default="POST", description="HTTP 方法")
    http_path: str = Field(default="/", description="请求路径")

    class Config:
        frozen = True


class LensTaskRequest:
    """未发送的 CreateLensTasks 请求"""

    def __init__(
        self,
        client,
        operation: Operation,
        http_request,
        params: CreateLensTaskRequest,
        data: CreateLensTaskResponse,
    ):
        """
        Args:
            client: 负责发送请求的客户端
            operation: 操作描述
            http_request: volcengine.base.Request.Request 实例（未签名）
            params: 请求参数，发送时序列化为请求体
            data: 响应占位对象，发送成功后原地填充
        """
        self.client = client
        self.operation = operation
        self.http_request = http_request
        self.params = params
        self.data = data

    @property
    def headers(self) -> MutableMapping[str, str]:
        """请求头（可修改，名称大小写不敏感）"""
        return self.http_request.headers

    @property
    def query(self) -> Dict[str, str]:
        """查询参数（Action / Version）"""
        return self.http_request.query

    @property
    def url(self) -> str:
        settings = self.client.settings
        return f"{settings.vepfs_scheme}://{settings.vepfs_endpoint}{self.http_request.path}"

    def sign(self) -> str:
        """
        写入请求体并签名

        Returns:
            请求体 JSON 字符串
        """
        body = self.params.to_body()
        self.http_request.body = body
        SignerV4.sign(self.http_request, self.client.credentials)
        return body

    def complete(self, payload: Any) -> CreateLensTaskResponse:
        """
        用响应数据填充 data

        Args:
            payload: 响应 JSON，支持 {"ResponseMetadata": ..., "Result": ...} 信封

        Returns:
            填充后的 data
        """
        if isinstance(payload, dict) and "Result" in payload:
            payload = payload["Result"]

        model = type(self.data)
        parsed = model.model_validate(payload)
        for name in model.model_fields:
            setattr(self.data, name, getattr(parsed, name))

        return self.data

    def send(self) -> CreateLensTaskResponse:
        """发送请求，返回填充后的响应"""
        return self.client.send_request(self)


class AsyncLensTaskRequest(LensTaskRequest):
    """异步发送的 CreateLensTasks 请求"""

    async def send(self) -> CreateLensTaskResponse:
        """发送请求，返回填充后的响应"""
        return await self.client.send_request(self)
