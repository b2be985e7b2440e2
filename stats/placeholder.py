# stats/placeholder.py
"""占位实现 - 接入真实战绩服务前使用，只回显命令和参数"""

from .base import ELITE_RATING, LOW_RATING, StatsBackend


class PlaceholderStats(StatsBackend):

    async def get_online_players(self) -> str:
        return "在线玩家"

    async def get_player_info(self, nickname: str) -> str:
        return f"玩家信息 {nickname}"

    async def get_leaderboard(self, limit: int) -> str:
        return f"排行榜 {limit}"

    async def get_online_elite_players(self, limit: int, min_rating: int = ELITE_RATING) -> str:
        return f"在线高手 {limit}"

    async def get_online_low_players(self, limit: int, max_rating: int = LOW_RATING) -> str:
        return f"在线低手 {limit}"

    async def get_group_leaderboard(self, limit: int) -> str:
        return f"群排行榜 {limit}"

    async def get_friend_list(self, nickname: str | None) -> str:
        return f"好友列表 {nickname}"

    async def get_online_friend_list(self, nickname: str | None) -> str:
        return f"在线好友列表 {nickname}"

    async def get_player_stats(self, nickname: str, games: int) -> str:
        return f"战绩统计 {nickname} {games}"

    async def get_matchup_stats(self, nickname1: str, nickname2: str) -> str:
        return f"对局统计 {nickname1} {nickname2}"

    async def get_weekly_report(self, nickname: str | None) -> str:
        return f"个人周报 {nickname}"

    async def get_daily_report(self, nickname: str | None) -> str:
        return f"个人日报 {nickname}"
