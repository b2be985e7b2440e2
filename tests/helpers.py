from channel import Message, MessageType, Room
from configuration import RouterConfig


def make_config(**overrides) -> RouterConfig:
    conf = {
        "bot_name": "@小助手",
        "auto_reply_prefix": "",
        "alias_whitelist": "VP,阿强",
        "room_whitelist": "战队群",
    }
    conf.update(overrides)
    return RouterConfig.model_validate(conf)


def make_message(
    content: str,
    sender_name: str = "VP",
    sender_alias: str = "",
    room_topic: str | None = None,
    msg_type: MessageType = MessageType.TEXT,
    mention_text: str | None = None,
    is_self: bool = False,
) -> Message:
    room = Room(id="room_1", topic=room_topic) if room_topic is not None else None
    return Message(
        id="1",
        sender="wxid_sender",
        content=content,
        type=msg_type,
        sender_name=sender_name,
        sender_alias=sender_alias,
        receiver=room.id if room else "wxid_bot",
        room=room,
        mention_text=mention_text,
        is_self=is_self,
    )


class FakeCompletion:
    """记录问题并返回固定回答"""

    def __init__(self, answer: str = "AI 回答", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[tuple[str, object]] = []

    async def get_reply(self, question, service_type):
        self.calls.append((question, service_type))
        if self.error:
            raise self.error
        return self.answer
