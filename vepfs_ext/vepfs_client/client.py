"""
VEPFS Ext Client - 同步客户端
"""

import logging
from typing import Optional

import requests

from ..config import Settings
from ..schemas import CreateLensTaskResponse
from .base import VEPFSExtBase, LensTaskParams, RequestHook, service_error_detail
from .request import LensTaskRequest

logger = logging.getLogger(__name__)


class VEPFSExt(VEPFSExtBase):
    """vePFS 扩展客户端"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        request_hook: Optional[RequestHook] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        初始化客户端

        Args:
            settings: 配置对象，如果不传则从环境变量读取
            request_hook: 请求发送前的自定义处理
            session: HTTP 会话，如果不传则使用 SDK Service 自带的会话
        """
        super().__init__(settings=settings, request_hook=request_hook)
        if session is not None:
            self.session.close()
            self.session = session

        logger.info(f"VEPFSExt initialized: region={self.settings.volcengine_region}")

    def close(self) -> None:
        """关闭 HTTP 会话"""
        self.session.close()
        logger.debug("VEPFSExt session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def create_lens_task(self, params: LensTaskParams = None) -> CreateLensTaskResponse:
        """
        创建数据洞察任务

        Args:
            params: 请求参数

        Returns:
            包含 LensTaskId 的响应

        Raises:
            requests.HTTPError: 服务端返回错误状态码
            requests.RequestException: 网络错误
        """
        req, output = self.create_lens_task_inner(params)

        logger.info(f"Creating lens task: {req.params.lens_task_name}")
        req.send()
        logger.info(f"Lens task created: {output.lens_task_id}")

        return output

    def send_request(self, req: LensTaskRequest) -> CreateLensTaskResponse:
        """签名并发送请求，错误原样抛出"""
        body = req.sign()
        method = req.http_request.method

        logger.debug(f"Request: {method} {req.url} Action={req.operation.name}")

        response = self.session.request(
            method=method,
            url=req.url,
            params=req.query,
            headers=req.headers,
            data=body.encode("utf-8"),
            timeout=(self.settings.connection_timeout, self.settings.socket_timeout),
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
