import unittest
from unittest.mock import AsyncMock

from commands.dispatcher import CommandDispatcher
from commands.rules import CommandRule, exact, prefix, numeric
from stats import PlaceholderStats


class _EmptyLeaderboardStats(PlaceholderStats):
    async def get_leaderboard(self, limit: int):
        return None


class TestCommandDispatcher(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.dispatcher = CommandDispatcher(PlaceholderStats(), help_prefix="/ai")

    async def test_simple_commands(self) -> None:
        cases = {
            "在线玩家": "在线玩家",
            "查询VP": "玩家信息 VP",
            "查询 VP": "玩家信息 VP",
            "排行榜": "排行榜 10",
            "排行榜10": "排行榜 10",
            "排行榜 3": "排行榜 3",
            "在线高手5": "在线高手 5",
            "在线低手 7": "在线低手 7",
            "群排行榜": "群排行榜 10",
            "群排行榜3": "群排行榜 3",
            "好友列表VP": "好友列表 VP",
            "在线好友 VP": "在线好友列表 VP",
            "个人周报VP": "个人周报 VP",
            "个人日报 VP": "个人日报 VP",
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(await self.dispatcher.dispatch(text), expected)

    async def test_surrounding_whitespace_is_ignored(self) -> None:
        self.assertEqual(await self.dispatcher.dispatch("  在线玩家 \n"), "在线玩家")

    async def test_numeric_leaderboard_wins_over_exact(self) -> None:
        stats = AsyncMock(spec=PlaceholderStats)
        stats.get_leaderboard.return_value = "top"
        dispatcher = CommandDispatcher(stats)

        self.assertEqual(await dispatcher.dispatch("排行榜10"), "top")
        stats.get_leaderboard.assert_awaited_once_with(10)

    async def test_bad_numeric_argument_falls_through(self) -> None:
        self.assertIsNone(await self.dispatcher.dispatch("排行榜abc"))
        self.assertIsNone(await self.dispatcher.dispatch("在线高手"))
        self.assertIsNone(await self.dispatcher.dispatch("在线低手 五"))

    async def test_bad_argument_can_still_reach_help(self) -> None:
        response = await self.dispatcher.dispatch("排行榜帮助")
        self.assertIsNotNone(response)
        self.assertTrue(response.startswith("可用命令"))
        self.assertIn('"/ai 你的问题"', response)

    async def test_query_without_nickname_does_not_match(self) -> None:
        self.assertIsNone(await self.dispatcher.dispatch("查询"))
        self.assertIsNone(await self.dispatcher.dispatch("查询   "))

    async def test_optional_nickname_defaults_to_sender(self) -> None:
        self.assertEqual(await self.dispatcher.dispatch("好友列表", self_name="阿强"), "好友列表 阿强")
        self.assertEqual(await self.dispatcher.dispatch("个人周报  ", self_name="阿强"), "个人周报 阿强")
        # 提供了昵称时不使用发送者
        self.assertEqual(await self.dispatcher.dispatch("个人日报 VP", self_name="阿强"), "个人日报 VP")

    async def test_player_stats_arguments(self) -> None:
        self.assertEqual(await self.dispatcher.dispatch("战绩统计VP"), "战绩统计 VP 10")
        self.assertEqual(await self.dispatcher.dispatch("战绩统计VP 20"), "战绩统计 VP 20")
        self.assertEqual(await self.dispatcher.dispatch("战绩统计 VP 20"), "战绩统计 VP 20")
        self.assertEqual(await self.dispatcher.dispatch("战绩统计 VP abc"), "战绩统计 VP 10")
        self.assertIsNone(await self.dispatcher.dispatch("战绩统计"))

    async def test_matchup_arguments(self) -> None:
        self.assertEqual(await self.dispatcher.dispatch("对局统计VP_CHN"), "对局统计 VP CHN")
        self.assertEqual(await self.dispatcher.dispatch("对局统计VP CHN"), "对局统计 VP CHN")
        self.assertEqual(await self.dispatcher.dispatch("对局统计 VP  CHN"), "对局统计 VP CHN")
        self.assertIsNone(await self.dispatcher.dispatch("对局统计VP"))
        # 下划线后为空不算第二个昵称
        self.assertIsNone(await self.dispatcher.dispatch("对局统计VP_"))
        self.assertIsNone(await self.dispatcher.dispatch("对局统计 VP _ "))

    async def test_help_is_substring_match(self) -> None:
        response = await self.dispatcher.dispatch("请问怎么用，需要帮助")
        self.assertIn("在线玩家", response)

    async def test_unknown_text_returns_none(self) -> None:
        self.assertIsNone(await self.dispatcher.dispatch("今天天气怎么样"))

    async def test_empty_handler_result_falls_through_to_later_rules(self) -> None:
        dispatcher = CommandDispatcher(_EmptyLeaderboardStats())
        self.assertIsNone(await dispatcher.dispatch("排行榜"))
        self.assertIsNone(await dispatcher.dispatch("排行榜10"))
        self.assertEqual(await dispatcher.dispatch("群排行榜"), "群排行榜 10")

        later = AsyncMock(return_value="later")
        rules = [
            CommandRule("first", exact("x"), AsyncMock(return_value=None)),
            CommandRule("second", exact("x"), later),
        ]
        self.assertEqual(await CommandDispatcher(None, rules=rules).dispatch("x"), "later")
        later.assert_awaited_once_with()

    async def test_only_first_answering_rule_runs(self) -> None:
        first = AsyncMock(return_value="first")
        second = AsyncMock(return_value="second")
        rules = [
            CommandRule("a", prefix("排行榜", numeric), first),
            CommandRule("b", prefix("排行榜", numeric), second),
        ]
        self.assertEqual(await CommandDispatcher(None, rules=rules).dispatch("排行榜5"), "first")
        first.assert_awaited_once_with(limit=5)
        second.assert_not_awaited()

    async def test_handler_errors_propagate(self) -> None:
        stats = AsyncMock(spec=PlaceholderStats)
        stats.get_online_players.side_effect = RuntimeError("backend down")
        with self.assertRaises(RuntimeError):
            await CommandDispatcher(stats).dispatch("在线玩家")


if __name__ == "__main__":
    unittest.main()
