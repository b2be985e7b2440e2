"""AI 对话服务 - 按 ChatType 选择具体的模型"""

import asyncio
import logging
from typing import Dict, Optional

from constants import ChatType

from .ai_chatgpt import ChatGPT
from .ai_kimi import Kimi
from .base import CompletionError, OpenAICompatible

logger = logging.getLogger(__name__)

# 每个 ChatType 都必须有对应实现
PROVIDER_CLASSES = {
    ChatType.CHATGPT: ChatGPT,
    ChatType.KIMI: Kimi,
}


class CompletionService:
    def __init__(self, providers: Dict[ChatType, OpenAICompatible], timeout: Optional[float] = None):
        self.providers = providers
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "CompletionService":
        """根据配置初始化所有可用的模型"""
        confs = {
            ChatType.CHATGPT: config.CHATGPT,
            ChatType.KIMI: config.KIMI,
        }
        providers = {}
        for chat_type, provider_cls in PROVIDER_CLASSES.items():
            conf = confs.get(chat_type) or {}
            if not provider_cls.value_check(conf):
                continue
            try:
                providers[chat_type] = provider_cls(conf)
                logger.info(f"已加载 {chat_type.name}: {providers[chat_type].model}")
            except Exception as e:
                logger.error(f"初始化 {chat_type.name} 失败: {e}")

        if config.ROUTER.service_type not in providers:
            logger.warning(f"配置的服务 {config.ROUTER.service_type.name} 未加载，AI 回复将不可用")
        return cls(providers, timeout=config.ROUTER.ai_timeout)

    async def get_reply(self, question: str, service_type: ChatType) -> str:
        try:
            chat_type = ChatType(service_type)
        except ValueError as e:
            raise CompletionError(f"不支持的服务类型: {service_type}，可用: {ChatType.help_hint()}") from e

        provider = self.providers.get(chat_type)
        if provider is None:
            raise CompletionError(f"{chat_type.name} 未配置")

        try:
            return await asyncio.wait_for(
                asyncio.to_thread(provider.get_answer, question),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{provider!r} 在 {self.timeout} 秒内未返回")
            raise CompletionError(f"{provider!r} 调用超时") from e
