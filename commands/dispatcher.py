"""关键字命令分发"""

import logging
from typing import List, Optional

from constants import HELP_KEYWORD
from stats import StatsBackend

from .help import get_help_message
from .rules import (
    CommandRule,
    contains,
    exact,
    nickname,
    numeric,
    optional_nickname,
    pair,
    prefix,
    stats_args,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def build_rules(stats: StatsBackend, help_prefix: str = "") -> List[CommandRule]:
    """按优先级排列的命令表，顺序即匹配顺序"""

    async def online_players():
        return await stats.get_online_players()

    async def leaderboard_default():
        return await stats.get_leaderboard(DEFAULT_LIMIT)

    async def leaderboard(limit):
        return await stats.get_leaderboard(limit)

    async def group_leaderboard_default():
        return await stats.get_group_leaderboard(DEFAULT_LIMIT)

    async def group_leaderboard(limit):
        return await stats.get_group_leaderboard(limit)

    async def online_elite(limit):
        return await stats.get_online_elite_players(limit)

    async def online_low(limit):
        return await stats.get_online_low_players(limit)

    async def help_message():
        return get_help_message(help_prefix)

    return [
        CommandRule("在线玩家", exact("在线玩家"), online_players),
        CommandRule("查询", prefix("查询", nickname), stats.get_player_info),
        CommandRule("排行榜", exact("排行榜"), leaderboard_default),
        CommandRule("排行榜N", prefix("排行榜", numeric), leaderboard),
        CommandRule("在线高手", prefix("在线高手", numeric), online_elite),
        CommandRule("在线低手", prefix("在线低手", numeric), online_low),
        CommandRule("群排行榜", exact("群排行榜"), group_leaderboard_default),
        CommandRule("群排行榜N", prefix("群排行榜", numeric), group_leaderboard),
        CommandRule("好友列表", prefix("好友列表", optional_nickname), stats.get_friend_list, defaults_to_self=True),
        CommandRule("在线好友", prefix("在线好友", optional_nickname), stats.get_online_friend_list, defaults_to_self=True),
        CommandRule("战绩统计", prefix("战绩统计", stats_args), stats.get_player_stats),
        CommandRule("对局统计", prefix("对局统计", pair), stats.get_matchup_stats),
        CommandRule("个人周报", prefix("个人周报", optional_nickname), stats.get_weekly_report, defaults_to_self=True),
        CommandRule("个人日报", prefix("个人日报", optional_nickname), stats.get_daily_report, defaults_to_self=True),
        # 必须放在最后，避免抢先匹配包含“帮助”的其他命令
        CommandRule("帮助", contains(HELP_KEYWORD), help_message),
    ]


class CommandDispatcher:
    """按顺序尝试命令规则，返回第一个有内容的回复"""

    def __init__(self, stats: StatsBackend, help_prefix: str = "", rules: Optional[List[CommandRule]] = None):
        self.rules = rules if rules is not None else build_rules(stats, help_prefix)

    async def dispatch(self, text: str, self_name: Optional[str] = None) -> Optional[str]:
        """
        匹配并执行命令

        :param text: 消息正文（群聊已去掉 @机器人）
        :param self_name: 发送者昵称，可选昵称参数缺省时使用
        :return: 回复文本；没有命令命中或处理函数没有结果时返回 None
        """
        text = text.strip()
        logger.debug(f"收到消息: {text}")

        for rule in self.rules:
            captures = rule.match(text)
            if captures is None:
                continue
            if rule.defaults_to_self and not captures.get("nickname"):
                captures["nickname"] = self_name

            # 处理函数的异常直接抛给调用方
            response = await rule.handler(**captures)
            if response:
                logger.debug(f"命令 {rule.name} 命中")
                return response
            logger.debug(f"命令 {rule.name} 匹配但无结果，继续尝试")

        return None
