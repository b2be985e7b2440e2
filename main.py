#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GameBot - 战绩查询群聊机器人
"""

import asyncio
import signal
import logging
import sys
from argparse import ArgumentParser

from ai_providers import CompletionService
from bot import GameBot, __version__
from commands import CommandDispatcher
from configuration import Config
from stats import PlaceholderStats


def setup_logging(level: int = logging.INFO):
    """配置日志"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # 降低第三方库日志级别
    for name in ["httpx", "httpcore", "openai", "urllib3"]:
        logging.getLogger(name).setLevel(logging.WARNING)


def create_bot(channel, config: Config, mode: str | None = None) -> GameBot:
    """按配置组装机器人"""
    router_config = config.ROUTER
    if mode:
        router_config = router_config.model_copy(update={"mode": mode})
    dispatcher = CommandDispatcher(PlaceholderStats(), help_prefix=router_config.auto_reply_prefix)
    completion = CompletionService.from_config(config)
    return GameBot(channel=channel, config=router_config, dispatcher=dispatcher, completion=completion)


async def run_wechat(mode: str | None = None):
    """微信模式"""
    from channel import WeChatChannel

    if WeChatChannel is None:
        print("错误: wcferry 不可用，请在 Windows 环境下运行")
        print("如需本地调试，请运行: python main.py --local")
        sys.exit(1)

    config = Config()
    channel = WeChatChannel(debug=False)
    bot = create_bot(channel, config, mode)

    loop = asyncio.get_running_loop()

    # 信号处理
    def handle_signal():
        logging.info("收到退出信号，正在清理...")
        asyncio.ensure_future(bot.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, handle_signal)
        except NotImplementedError:
            # Windows 上不支持，交给 KeyboardInterrupt
            pass

    logging.info(f"GameBot v{__version__} 启动中...")

    try:
        await bot.start()
    except Exception as e:
        logging.error(f"运行出错: {e}", exc_info=True)
    finally:
        await bot.stop()
        channel.cleanup()


def main():
    parser = ArgumentParser(description="GameBot 战绩查询机器人")
    parser.add_argument(
        "-d", "--debug", action="store_true", help="调试模式"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="安静模式"
    )
    parser.add_argument(
        "--local", action="store_true", help="本地调试模式（无需微信）"
    )
    parser.add_argument(
        "--mode", choices=["default", "sharding"], help="覆盖配置中的消息处理模式"
    )
    args = parser.parse_args()

    # 日志级别
    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    setup_logging(level)

    if args.local:
        import local_main
        asyncio.run(local_main.main(args.mode))
    else:
        asyncio.run(run_wechat(args.mode))


if __name__ == "__main__":
    main()
