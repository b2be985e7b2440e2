# channel/local.py
"""本地命令行 Channel - 用于调试"""

import asyncio
import logging
from typing import Callable, Any

from .base import Channel, Message, MessageType, Contact, Room

logger = logging.getLogger(__name__)


class LocalChannel(Channel):
    """本地命令行 Channel - 用于在没有微信的环境下调试

    room_topic 不为空时，命令行输入都当作来自该群的消息。
    """

    def __init__(
        self,
        bot_name: str = "小助手",
        user_name: str = "User",
        user_alias: str = "",
        room_topic: str | None = None,
    ):
        self._bot_id = "local_bot"
        self._bot_name = bot_name
        self._user_id = "local_user"
        self._user_name = user_name
        self._room = Room(id="local_room", topic=room_topic) if room_topic else None
        self._running = False
        self._message_queue: asyncio.Queue[Message] = asyncio.Queue()
        self._contacts: dict[str, Contact] = {
            self._bot_id: Contact(id=self._bot_id, name=bot_name),
            self._user_id: Contact(id=self._user_id, name=user_name, alias=user_alias),
        }
        self._msg_counter = 0
        self.outbox: list[tuple[str, str]] = []  # (receiver, content)

    @property
    def bot_id(self) -> str:
        return self._bot_id

    async def send_text(
        self,
        content: str,
        receiver: str,
        at_list: list[str] | None = None,
    ) -> bool:
        self.outbox.append((receiver, content))
        # 在命令行打印机器人回复
        print(f"\n\033[36m[{self._bot_name}]\033[0m {content}\n")
        return True

    async def start(self, on_message: Callable[[Message], Any]) -> None:
        """启动命令行交互循环"""
        self._running = True
        print(f"\n{'='*50}")
        print(f"  {self._bot_name} Local Channel 已启动")
        print(f"  输入消息与机器人对话，输入 'quit' 退出")
        print(f"{'='*50}\n")

        input_task = asyncio.create_task(self._read_input_loop())

        while self._running:
            try:
                msg = await asyncio.wait_for(
                    self._message_queue.get(),
                    timeout=0.5
                )
                if asyncio.iscoroutinefunction(on_message):
                    await on_message(msg)
                else:
                    on_message(msg)
            except asyncio.TimeoutError:
                continue
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"处理消息时出错: {e}", exc_info=True)

        input_task.cancel()
        try:
            await input_task
        except asyncio.CancelledError:
            pass

    async def _read_input_loop(self) -> None:
        """异步读取命令行输入"""
        loop = asyncio.get_running_loop()
        while self._running:
            try:
                # 在线程中读取输入（避免阻塞事件循环）
                line = await loop.run_in_executor(None, self._read_line)
                if line is None:
                    continue

                line = line.strip()
                if not line:
                    continue

                if line.lower() in ('quit', 'exit', 'q'):
                    print("\n再见！")
                    self._running = False
                    break

                await self._message_queue.put(self.simulate_message(line, room=self._room))

            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"读取输入时出错: {e}")

    def _read_line(self) -> str | None:
        """同步读取一行输入"""
        try:
            print(f"\033[33m[{self._user_name}]\033[0m ", end="", flush=True)
            return input()
        except EOFError:
            return None
        except KeyboardInterrupt:
            return "quit"

    async def stop(self) -> None:
        self._running = False

    def get_contact(self, user_id: str) -> Contact | None:
        return self._contacts.get(user_id)

    def simulate_message(
        self,
        content: str,
        sender: str | None = None,
        room: Room | None = None,
        msg_type: MessageType = MessageType.TEXT,
        mention_text: str | None = None,
    ) -> Message:
        """模拟收到消息（用于测试）"""
        self._msg_counter += 1
        sender = sender or self._user_id
        contact = self.get_contact(sender)

        return Message(
            id=f"local_{self._msg_counter}",
            sender=sender,
            content=content,
            type=msg_type,
            sender_name=contact.name if contact else sender,
            sender_alias=contact.alias if contact else "",
            receiver=room.id if room else self._bot_id,
            room=room,
            mention_text=mention_text,
            is_self=sender == self._bot_id,
        )
