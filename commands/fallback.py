"""没有命中关键字命令时，把带前缀的消息交给 AI 回复"""

import logging
from typing import Optional

from ai_providers import CompletionService
from configuration import RouterConfig

logger = logging.getLogger(__name__)


def build_question(text: str, prefix: str, mention_text: Optional[str] = None) -> Optional[str]:
    """
    组装发给 AI 的问题

    前缀非空且消息不以前缀开头时返回 None（不交给 AI）。
    群聊中通道提供了去掉 @ 的正文时优先使用它，否则去掉一次前缀。
    """
    if prefix and not text.startswith(prefix):
        return None
    if mention_text:
        return mention_text
    return text.replace(prefix, "", 1).strip()


class AIFallback:
    def __init__(self, completion: CompletionService, config: RouterConfig):
        self.completion = completion
        self.config = config

    async def fallback(self, text: str, mention_text: Optional[str] = None) -> Optional[str]:
        question = build_question(text, self.config.auto_reply_prefix, mention_text)
        if question is None:
            return None
        logger.info(f"交给 {self.config.service_type.name} 回复: {question[:50]}")
        return await self.completion.get_reply(question, self.config.service_type)
