"""消息准入判断：谁的消息、哪个群的消息需要回复"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from channel import Message
from configuration import RouterConfig

GROUP = "group"
DIRECT = "direct"


@dataclass(frozen=True)
class Eligibility:
    is_bot_self: bool = False  # 机器人自己发的（防止自问自答）
    is_text: bool = True
    is_room: bool = False  # 白名单群且 @ 了机器人
    is_alias: bool = False  # 白名单联系人私聊

    @property
    def context(self) -> Optional[str]:
        """group / direct / None（不回复）"""
        if self.is_bot_self or not self.is_text:
            return None
        if self.is_room:
            return GROUP
        if self.is_alias:
            return DIRECT
        return None


def mention_form(name: str) -> str:
    return f"@{name}" if name else ""


def is_bot_self(msg: Message, config: RouterConfig) -> bool:
    return config.bot_name in (mention_form(msg.sender_alias), mention_form(msg.sender_name))


def classify(msg: Message, config: RouterConfig) -> Eligibility:
    room = msg.room
    is_room = bool(
        room is not None
        and room.topic in config.room_whitelist
        and config.bot_name in msg.content
    )
    is_alias = bool(
        room is None
        and (
            (msg.sender_alias and msg.sender_alias in config.alias_whitelist)
            or (msg.sender_name and msg.sender_name in config.alias_whitelist)
        )
    )
    return Eligibility(
        is_bot_self=is_bot_self(msg, config),
        is_text=msg.is_text,
        is_room=is_room,
        is_alias=is_alias,
    )
