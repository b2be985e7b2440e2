from enum import IntEnum, unique


@unique
class ChatType(IntEnum):
    # UnKnown = 0  # 未知, 即未设置
    CHATGPT = 1  # ChatGPT
    KIMI = 3  # Kimi (Moonshot)

    @staticmethod
    def help_hint() -> str:
        return str({member.value: member.name for member in ChatType}).replace('{', '').replace('}', '')


# 旧配置里的服务标签
LEGACY_SERVICE_TAGS = {
    "GPT": ChatType.CHATGPT,
    "KIMI": ChatType.KIMI,
}

# 单条消息最大长度（按字符计）
SINGLE_MESSAGE_MAX_SIZE = 500

# 分片模式下消息回显的分隔行
ECHO_DELIMITER = "- - - - - - - - - - - - - - -"
# 分片模式下问题与回答之间的分隔
ANSWER_SEPARATOR = "\n ---------------- \n "

# 微信系统账号
SYSTEM_ACCOUNT_NAME = "微信团队"

HELP_KEYWORD = "帮助"
