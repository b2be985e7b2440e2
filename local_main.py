#!/usr/bin/env python3
# local_main.py
"""本地调试入口 - 无需微信环境"""

import asyncio
import logging
import os

from channel import LocalChannel
from configuration import Config


async def main(mode: str | None = None):
    """主函数"""
    from main import create_bot, setup_logging

    setup_logging()
    logger = logging.getLogger("LocalMain")

    # 加载配置
    try:
        config = Config()
    except Exception as e:
        logger.error(f"加载配置失败: {e}")
        logger.info("请确保 config.yaml 文件存在且配置正确")
        return

    # LOCAL_ROOM 设置后，输入都当作该群的消息（需要在群白名单里并 @机器人）
    router = config.ROUTER
    user_name = os.environ.get("LOCAL_USER") or next(iter(sorted(router.alias_whitelist)), "User")
    channel = LocalChannel(
        bot_name=router.bot_name.lstrip("@"),
        user_name=user_name,
        room_topic=os.environ.get("LOCAL_ROOM"),
    )
    bot = create_bot(channel, config, mode)

    try:
        await bot.start()
    except KeyboardInterrupt:
        logger.info("收到退出信号")
    except Exception as e:
        logger.error(f"运行出错: {e}", exc_info=True)
    finally:
        await bot.stop()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n再见！")
