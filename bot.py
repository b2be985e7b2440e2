# bot.py
"""GameBot - 战绩查询 + AI 对话的群聊机器人"""

import logging

from ai_providers import CompletionService
from channel import Channel, Message
from commands import (
    AIFallback,
    CommandDispatcher,
    GROUP,
    ReplyTarget,
    classify,
    compose_reply,
    emit,
    strip_echo,
)
from commands.access import is_bot_self
from configuration import RouterConfig
from constants import SYSTEM_ACCOUNT_NAME

__version__ = "1.0.0"

logger = logging.getLogger("GameBot")


class GameBot:
    """消息入口：准入判断 -> 关键字命令 -> AI 兜底 -> 分片发送"""

    def __init__(
        self,
        channel: Channel,
        config: RouterConfig,
        dispatcher: CommandDispatcher,
        completion: CompletionService,
    ):
        self.channel = channel
        self.config = config
        self.dispatcher = dispatcher
        self.completion = completion
        self.fallback = AIFallback(completion, config)
        self.LOG = logger

    async def start(self) -> None:
        """启动机器人"""
        self.LOG.info(f"GameBot v{__version__} 启动中（{self.config.mode} 模式）...")
        if self.config.mode == "sharding":
            await self.channel.start(self.handle_sharded)
        else:
            await self.channel.start(self.handle_message)

    async def stop(self) -> None:
        """停止机器人"""
        await self.channel.stop()
        self.LOG.info("GameBot 已停止")

    def _target(self, msg: Message, context: str) -> ReplyTarget:
        if context == GROUP:
            return ReplyTarget(self.channel, msg.room.id)
        return ReplyTarget(self.channel, msg.sender)

    async def handle_message(self, msg: Message) -> None:
        """默认模式：关键字命令优先，未命中且带前缀时交给 AI"""
        eligibility = classify(msg, self.config)
        context = eligibility.context
        if context is None:
            return

        try:
            # 首尾空白都去掉，命令匹配和 AI 前缀判断都基于去空白后的文本
            if context == GROUP:
                text = msg.content.replace(self.config.bot_name, "", 1).strip()
                mention_text = msg.mention_text
            else:
                text = msg.content.strip()
                mention_text = None
            target = self._target(msg, context)

            response = await self.dispatcher.dispatch(text, self_name=msg.sender_name)
            if response:
                await emit(target, response)
                return

            answer = await self.fallback.fallback(text, mention_text)
            if answer is not None:
                await emit(target, answer)
        except Exception as e:
            self.LOG.error(f"处理消息时出错: {e}", exc_info=True)

    async def handle_sharded(self, msg: Message) -> None:
        """分片模式：所有消息直接交给 AI，群聊需 @机器人"""
        if msg.is_self or is_bot_self(msg, self.config) or not msg.is_text:
            return
        if msg.sender_name == SYSTEM_ACCOUNT_NAME:
            return

        try:
            if msg.room is None:
                self.LOG.info(f"AI 对话用户: {msg.sender_name}")
                answer = await self.completion.get_reply(msg.content, self.config.service_type)
                await emit(ReplyTarget(self.channel, msg.sender), answer)
                return

            # 群聊中没有 @机器人 不回复
            if self.config.bot_name not in msg.content:
                return

            question = strip_echo(msg.content).replace(self.config.bot_name, "", 1)
            answer = await self.completion.get_reply(question, self.config.service_type)
            await emit(ReplyTarget(self.channel, msg.room.id), compose_reply(question, answer))
        except Exception as e:
            self.LOG.error(f"处理消息时出错: {e}", exc_info=True)
