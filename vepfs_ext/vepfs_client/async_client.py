"""
Async VEPFS Ext Client - 异步客户端
"""

import logging
from typing import Optional

import httpx

from ..config import Settings
from ..schemas import CreateLensTaskResponse
from .base import VEPFSExtBase, LensTaskParams, RequestHook, service_error_detail
from .request import AsyncLensTaskRequest

logger = logging.getLogger(__name__)


class AsyncVEPFSExt(VEPFSExtBase):
    """异步 vePFS 扩展客户端"""

    request_class = AsyncLensTaskRequest

    def __init__(
        self,
        settings: Optional[Settings] = None,
        request_hook: Optional[RequestHook] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        初始化异步客户端

        Args:
            settings: 配置对象，如果不传则从环境变量读取
            request_hook: 请求发送前的自定义处理
            http_client: HTTP 客户端，如果不传则在首次请求时创建
        """
        super().__init__(settings=settings, request_hook=request_hook)
        # 发送走 httpx，SDK Service 自带的 requests 会话不会用到
        self.session.close()
        self._client: Optional[httpx.AsyncClient] = http_client

        logger.info(f"AsyncVEPFSExt initialized: region={self.settings.volcengine_region}")

    async def _get_client(self) -> httpx.AsyncClient:
        """获取或创建 HTTP 客户端"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    float(self.settings.socket_timeout),
                    connect=float(self.settings.connection_timeout),
                ),
            )
        return self._client

    async def close(self) -> None:
        """关闭客户端连接"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
            logger.debug("AsyncVEPFSExt connection closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def create_lens_task(self, params: LensTaskParams = None) -> CreateLensTaskResponse:
        """
        创建数据洞察任务

        Args:
            params: 请求参数

        Returns:
            包含 LensTaskId 的响应

        Raises:
            httpx.HTTPStatusError: 服务端返回错误状态码
            httpx.HTTPError: 网络错误
        """
        req, output = self.create_lens_task_inner(params)

        logger.info(f"Creating lens task: {req.params.lens_task_name}")
        await req.send()
        logger.info(f"Lens task created: {output.lens_task_id}")

        return output

    async def send_request(self, req: AsyncLensTaskRequest) -> CreateLensTaskResponse:
        """签名并发送请求，错误原样抛出"""
        client = await self._get_client()
        body = req.sign()
        method = req.http_request.method

        logger.debug(f"Request: {method} {req.url} Action={req.operation.name}")

        response = await client.request(
            method=method,
            url=req.url,
            params=req.query,
            headers=req.headers,
            content=body.encode("utf-8"),
        )

        logger.debug(f"Response: {response.status_code}")

        if response.status_code >= 400:
            logger.error(
                "vePFS API error %s for %s - detail: %s",
                response.status_code,
                req.operation.name,
                service_error_detail(response.text),
            )
            response.raise_for_status()

        return req.complete(response.json())
