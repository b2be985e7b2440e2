# channel/__init__.py
from .base import Channel, Message, MessageType, Contact, Room
from .local import LocalChannel

__all__ = ["Channel", "Message", "MessageType", "Contact", "Room", "LocalChannel"]

# WeChatChannel 仅在 Windows 或有 wcferry 时可用
from .wechat import WCFERRY_AVAILABLE, WeChatChannel

if WCFERRY_AVAILABLE:
    __all__.append("WeChatChannel")
else:
    WeChatChannel = None
