# stats/base.py
"""战绩数据查询接口"""

from abc import ABC, abstractmethod

# 在线高手/低手的 ELO 分界
ELITE_RATING = 2000
LOW_RATING = 1500


class StatsBackend(ABC):
    """战绩数据查询接口

    每个方法返回格式化好的回复文本；查不到时返回 None 或空串，
    由命令分发器决定是否继续匹配后续命令。
    """

    @abstractmethod
    async def get_online_players(self) -> str | None:
        """群友实时在线状态"""
        ...

    @abstractmethod
    async def get_player_info(self, nickname: str) -> str | None:
        ...

    @abstractmethod
    async def get_leaderboard(self, limit: int) -> str | None:
        """世界排行榜前 limit 名"""
        ...

    @abstractmethod
    async def get_online_elite_players(self, limit: int, min_rating: int = ELITE_RATING) -> str | None:
        """在线且 ELO 高于 min_rating 的前 limit 名"""
        ...

    @abstractmethod
    async def get_online_low_players(self, limit: int, max_rating: int = LOW_RATING) -> str | None:
        """在线且 ELO 低于 max_rating 的前 limit 名"""
        ...

    @abstractmethod
    async def get_group_leaderboard(self, limit: int) -> str | None:
        ...

    @abstractmethod
    async def get_friend_list(self, nickname: str | None) -> str | None:
        ...

    @abstractmethod
    async def get_online_friend_list(self, nickname: str | None) -> str | None:
        ...

    @abstractmethod
    async def get_player_stats(self, nickname: str, games: int) -> str | None:
        """最近 games 场比赛统计"""
        ...

    @abstractmethod
    async def get_matchup_stats(self, nickname1: str, nickname2: str) -> str | None:
        """两名玩家之间的对局统计"""
        ...

    @abstractmethod
    async def get_weekly_report(self, nickname: str | None) -> str | None:
        ...

    @abstractmethod
    async def get_daily_report(self, nickname: str | None) -> str | None:
        ...
