def get_help_message(prefix: str = "") -> str:
    """命令帮助文本"""
    return f"""可用命令：
1. 在线玩家 - 查看群友实时在线状态
2. 查询 [昵称] - 查询玩家详细信息(如：查询VP)
3. 排行榜 - 查看世界前十名
4. 排行榜 [N] - 查看世界前N名
5. 在线高手 [N] - 查看在线ELO>2000的前N名
6. 在线低手 [N] - 查看在线ELO<1500的前N名
7. 群排行榜 - 查看群内前10名
8. 群排行榜 [N] - 查看群内前N名
9. 好友列表 [昵称] - 查看指定玩家的好友列表
10. 在线好友 [昵称] - 查看指定玩家的在线好友
11. 战绩统计 [昵称] [场数] - 查询最近N场比赛统计
12. 对局统计 [昵称1] [昵称2] - 查询两玩家对局统计
13. 个人周报 [昵称] - 查询上周统计数据
14. 个人日报 [昵称] - 查询昨日统计数据
15. AI对话 - 发送"{prefix} 你的问题"

注：[] 表示可选参数，不带昵称的命令默认查询发送者信息"""
