"""回复发送：超长消息按固定长度切分后依次发送"""

from dataclasses import dataclass
from typing import List, Optional

from channel import Channel
from constants import SINGLE_MESSAGE_MAX_SIZE


class SendError(Exception):
    """通道发送失败"""


@dataclass(frozen=True)
class ReplyTarget:
    """回复对象：群或私聊联系人"""
    channel: Channel
    receiver: str
    at_list: Optional[List[str]] = None

    async def send(self, text: str) -> None:
        if not await self.channel.send_text(text, self.receiver, self.at_list):
            raise SendError(f"发送到 {self.receiver} 失败")


def split_chunks(text: str, size: int = SINGLE_MESSAGE_MAX_SIZE) -> List[str]:
    """按字符切分，最后一段总会保留（长度正好是 size 的整数倍时为空串）"""
    chunks = []
    while len(text) > size:
        chunks.append(text[:size])
        text = text[size:]
    chunks.append(text)
    return chunks


async def emit(target: ReplyTarget, text: str, size: int = SINGLE_MESSAGE_MAX_SIZE) -> None:
    # 逐条等待发送完成，保证接收方看到的顺序
    for chunk in split_chunks(text, size):
        await target.send(chunk)
