"""
VEPFS Ext Base - 客户端公共部分

在火山引擎 SDK 的 Service 之上补充 CreateLensTasks 接口，
负责凭证校验和请求构建，发送由子类实现。
"""

import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple, Union

from requests.structures import CaseInsensitiveDict
from volcengine.ApiInfo import ApiInfo
from volcengine.Credentials import Credentials
from volcengine.ServiceInfo import ServiceInfo
from volcengine.base.Service import Service

from ..config import Settings, get_settings
from ..exceptions import ConfigurationException
from ..schemas import CreateLensTaskRequest, CreateLensTaskResponse
from .request import LensTaskRequest, Operation

logger = logging.getLogger(__name__)

CREATE_LENS_TASKS = Operation(name="CreateLensTasks", http_method="POST", http_path="/")

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

RequestHook = Callable[[LensTaskRequest], None]

LensTaskParams = Union[CreateLensTaskRequest, Dict[str, Any], None]


def service_error_detail(text: str) -> str:
    """从 OpenAPI 错误响应中提取 Code / Message"""
    try:
        error = json.loads(text)["ResponseMetadata"]["Error"]
        return f"{error.get('Code')}: {error.get('Message')}"
    except Exception:
        return text[:200]


class VEPFSExtBase(Service):
    """vePFS 扩展客户端基类"""

    request_class = LensTaskRequest

    def __init__(
        self,
        settings: Optional[Settings] = None,
        request_hook: Optional[RequestHook] = None,
    ):
        """
        初始化客户端

        Args:
            settings: 配置对象，如果不传则从环境变量读取
            request_hook: 请求发送前的自定义处理，每次调用执行一次

        Raises:
            ConfigurationException: 凭证缺失或 SDK 初始化失败
        """
        self.settings = settings or get_settings()
        self.request_hook = request_hook

        required = {
            "VOLCENGINE_ACCESS_KEY_ID": self.settings.volcengine_access_key_id,
            "VOLCENGINE_ACCESS_KEY_SECRET": self.settings.volcengine_access_key_secret,
            "VOLCENGINE_REGION": self.settings.volcengine_region,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationException(
                f"{', '.join(missing)} is required",
                detail="Failed to create session",
            )

        self.credentials = Credentials(
            self.settings.volcengine_access_key_id,
            self.settings.volcengine_access_key_secret,
            self.settings.vepfs_service_name,
            self.settings.volcengine_region,
            self.settings.volcengine_session_token,
        )
        service_info = ServiceInfo(
            self.settings.vepfs_endpoint,
            {"Accept": "application/json"},
            self.credentials,
            self.settings.connection_timeout,
            self.settings.socket_timeout,
            self.settings.vepfs_scheme,
        )
        api_info = {
            CREATE_LENS_TASKS.name: ApiInfo(
                CREATE_LENS_TASKS.http_method,
                CREATE_LENS_TASKS.http_path,
                {"Action": CREATE_LENS_TASKS.name, "Version": self.settings.vepfs_api_version},
                {},
                {},
            ),
        }

        try:
            super().__init__(service_info, api_info)
        except Exception as e:
            raise ConfigurationException("Failed to create session", detail=str(e)) from e

        self.api_info = api_info

    def init(self):
        """凭证只从 Settings 读取，跳过 SDK 的 VOLC_ACCESSKEY / ~/.volc/config 查找"""

    def new_request(
        self,
        operation: Operation,
        params: CreateLensTaskRequest,
        data: CreateLensTaskResponse,
    ) -> LensTaskRequest:
        """构建未签名的请求句柄"""
        http_request = self.prepare_request(self.api_info[operation.name], {})
        # 请求头按名称大小写不敏感，同名头只保留最后一次写入
        http_request.headers = CaseInsensitiveDict(http_request.headers)
        return self.request_class(self, operation, http_request, params, data)

    def create_lens_task_inner(
        self,
        params: LensTaskParams = None,
    ) -> Tuple[LensTaskRequest, CreateLensTaskResponse]:
        """
        构建创建数据洞察任务的请求，不发送

        Args:
            params: 请求参数，None 等同于空请求，dict 按 OpenAPI 字段名解析

        Returns:
            (请求句柄, 响应占位对象)，调用 send() 后占位对象被填充
        """
        if params is None:
            params = CreateLensTaskRequest()
        elif isinstance(params, dict):
            params = CreateLensTaskRequest.model_validate(params)

        output = CreateLensTaskResponse()
        req = self.new_request(CREATE_LENS_TASKS, params, output)

        if self.request_hook is not None:
            self.request_hook(req)

        req.headers["Content-Type"] = JSON_CONTENT_TYPE

        return req, output
