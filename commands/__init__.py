# commands package
"""
消息处理组件包

- access: 消息准入判断（白名单、@机器人、自身消息）
- rules / dispatcher: 关键字命令规则与顺序分发
- fallback: 未命中命令时的 AI 兜底
- emitter: 超长回复切分发送
- sharding: 分片模式的消息预处理
"""
from .access import DIRECT, GROUP, Eligibility, classify
from .dispatcher import CommandDispatcher, build_rules
from .emitter import ReplyTarget, SendError, emit, split_chunks
from .fallback import AIFallback, build_question
from .sharding import compose_reply, strip_echo

__all__ = [
    "DIRECT",
    "GROUP",
    "Eligibility",
    "classify",
    "CommandDispatcher",
    "build_rules",
    "ReplyTarget",
    "SendError",
    "emit",
    "split_chunks",
    "AIFallback",
    "build_question",
    "compose_reply",
    "strip_echo",
]
