# channel/base.py
"""Channel 抽象基类"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Any


class MessageType(IntEnum):
    """消息类型"""
    TEXT = 1
    IMAGE = 3
    VOICE = 34
    VIDEO = 43
    EMOJI = 47
    LOCATION = 48
    LINK = 49  # 链接/引用/小程序等
    FRIEND_REQUEST = 37
    SYSTEM = 10000
    UNKNOWN = 0


@dataclass(frozen=True)
class Room:
    """群聊信息"""
    id: str
    topic: str | None = None         # 群名称


@dataclass(frozen=True)
class Message:
    """统一消息格式（一次事件的只读快照）"""
    id: str                          # 消息 ID
    sender: str                      # 发送者 ID
    content: str                     # 原始消息内容（群聊中包含 @机器人）
    type: MessageType = MessageType.TEXT
    sender_name: str = ""            # 发送者昵称
    sender_alias: str = ""           # 发送者备注名
    receiver: str = ""               # 接收者 ID
    room: Room | None = None         # 群聊（私聊为 None）
    mention_text: str | None = None  # 去掉 @ 后的正文，通道不支持时为 None
    is_self: bool = False            # 是否机器人账号自己发出
    raw: Any = None                  # 原始消息对象（平台特定）

    @property
    def is_text(self) -> bool:
        return self.type == MessageType.TEXT


@dataclass
class Contact:
    """联系人信息"""
    id: str
    name: str
    alias: str = ""  # 备注名


class Channel(ABC):
    """Channel 抽象基类 - 定义消息收发接口"""

    @property
    @abstractmethod
    def bot_id(self) -> str:
        """机器人自身 ID"""
        ...

    @abstractmethod
    async def send_text(
        self,
        content: str,
        receiver: str,
        at_list: list[str] | None = None,
    ) -> bool:
        """发送文本消息

        Args:
            content: 消息内容
            receiver: 接收者 ID（用户 ID 或群 ID）
            at_list: 要 @ 的用户 ID 列表

        Returns:
            是否发送成功
        """
        ...

    @abstractmethod
    async def start(self, on_message: Callable[[Message], Any]) -> None:
        """启动消息接收循环

        Args:
            on_message: 消息处理回调（可以是 async 函数）
        """
        ...

    @abstractmethod
    async def stop(self) -> None:
        """停止消息接收"""
        ...

    @abstractmethod
    def get_contact(self, user_id: str) -> Contact | None:
        """获取联系人信息"""
        ...

