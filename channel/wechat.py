# channel/wechat.py
"""微信 Channel - 基于 wcferry"""

import asyncio
import logging
import re
from queue import Empty
from typing import Callable, Any

from .base import Channel, Message, MessageType, Contact, Room

logger = logging.getLogger(__name__)

# 尝试导入 wcferry（仅 Windows 可用）
try:
    from wcferry import Wcf, WxMsg
    WCFERRY_AVAILABLE = True
except ImportError:
    WCFERRY_AVAILABLE = False
    Wcf = None
    WxMsg = None

# 群消息开头的 @xxx（微信用 \u2005 作为分隔）
AT_PREFIX = re.compile(r"^@.*?[\u2005\s]")


def _convert_message_type(wx_type: int) -> MessageType:
    """转换微信消息类型到统一类型"""
    try:
        return MessageType(wx_type)
    except ValueError:
        return MessageType.UNKNOWN


class WeChatChannel(Channel):
    """微信 Channel - 封装 wcferry"""

    def __init__(self, wcf: "Wcf" = None, debug: bool = False):
        if not WCFERRY_AVAILABLE and wcf is None:
            raise ImportError("wcferry 不可用，请在 Windows 环境下安装")

        self._wcf = wcf or Wcf(debug=debug)
        self._bot_id = self._wcf.get_self_wxid()
        self._running = False
        self._tasks: set[asyncio.Task] = set()
        self._contacts_cache: dict[str, Contact] = {}
        self._load_contacts()

    def _load_contacts(self) -> None:
        """加载联系人缓存（群聊也在 Contact 表中，NickName 即群名称）"""
        try:
            contacts = self._wcf.query_sql(
                "MicroMsg.db",
                "SELECT UserName, NickName, Remark FROM Contact;"
            )
            for c in contacts:
                user_id = c["UserName"]
                self._contacts_cache[user_id] = Contact(
                    id=user_id,
                    name=c["NickName"],
                    alias=c.get("Remark") or "",
                )
        except Exception as e:
            logger.error(f"加载联系人失败: {e}")

    @property
    def bot_id(self) -> str:
        return self._bot_id

    async def send_text(
        self,
        content: str,
        receiver: str,
        at_list: list[str] | None = None,
    ) -> bool:
        try:
            at_str = ",".join(at_list) if at_list else ""
            ret = await asyncio.to_thread(
                self._wcf.send_text,
                content,
                receiver,
                at_str
            )
            # wcferry 成功时返回 0
            return ret == 0
        except Exception as e:
            logger.error(f"发送消息失败: {e}")
            return False

    async def start(self, on_message: Callable[[Message], Any]) -> None:
        """启动消息接收循环"""
        self._running = True
        self._wcf.enable_receiving_msg()

        logger.info("WeChatChannel 已启动")

        while self._running:
            try:
                # 在线程中获取消息（阻塞操作）
                wx_msg = await asyncio.to_thread(self._get_msg_with_timeout)
                if wx_msg is None:
                    continue

                msg = self._convert_wx_msg(wx_msg)
                if msg is None:
                    continue

                logger.debug(f"收到消息: {msg.sender}: {msg.content[:50]}")

                if asyncio.iscoroutinefunction(on_message):
                    # 每条消息独立处理，互不阻塞
                    task = asyncio.create_task(on_message(msg))
                    self._tasks.add(task)
                    task.add_done_callback(self._tasks.discard)
                else:
                    on_message(msg)

            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"处理消息时出错: {e}", exc_info=True)

    def _get_msg_with_timeout(self) -> "WxMsg | None":
        """带超时的消息获取"""
        try:
            if self._wcf.is_receiving_msg():
                return self._wcf.get_msg()
        except Empty:
            pass
        return None

    def _convert_wx_msg(self, wx_msg: "WxMsg") -> Message | None:
        """转换微信消息到统一格式"""
        try:
            room = None
            mention_text = None
            if wx_msg.from_group():
                room_contact = self.get_contact(wx_msg.roomid)
                room = Room(
                    id=wx_msg.roomid,
                    topic=room_contact.name if room_contact else None,
                )
                if wx_msg.is_at(self._bot_id):
                    mention_text = AT_PREFIX.sub("", wx_msg.content).strip()

            contact = self.get_contact(wx_msg.sender)
            if contact:
                sender_name, sender_alias = contact.name, contact.alias
            else:
                sender_name, sender_alias = self._room_alias(wx_msg.sender, room), ""

            return Message(
                id=str(wx_msg.id),
                sender=wx_msg.sender,
                content=wx_msg.content,
                type=_convert_message_type(wx_msg.type),
                sender_name=sender_name,
                sender_alias=sender_alias,
                receiver=room.id if room else self._bot_id,
                room=room,
                mention_text=mention_text,
                is_self=wx_msg.from_self(),
                raw=wx_msg,
            )
        except Exception as e:
            logger.error(f"转换消息失败: {e}")
            return None

    def _room_alias(self, user_id: str, room: Room | None) -> str:
        """非好友的群成员只能取群昵称"""
        if room:
            try:
                alias = self._wcf.get_alias_in_chatroom(user_id, room.id)
                if alias and alias.strip():
                    return alias
            except Exception as e:
                logger.debug(f"获取群昵称失败: {e}")
        return user_id

    async def stop(self) -> None:
        self._running = False
        # 等待正在处理的消息发完回复
        pending = [t for t in self._tasks if t is not asyncio.current_task()]
        if pending:
            logger.info(f"等待 {len(pending)} 条消息处理完成...")
            await asyncio.gather(*pending, return_exceptions=True)
        logger.info("WeChatChannel 已停止")

    def get_contact(self, user_id: str) -> Contact | None:
        return self._contacts_cache.get(user_id)

    def cleanup(self) -> None:
        """清理资源"""
        try:
            self._wcf.cleanup()
        except Exception as e:
            logger.error(f"清理 wcf 失败: {e}")
