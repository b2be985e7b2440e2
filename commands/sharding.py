from constants import ANSWER_SEPARATOR, ECHO_DELIMITER


def strip_echo(text: str, delimiter: str = ECHO_DELIMITER) -> str:
    """只保留最后一个分隔行之后的内容（引用回复时去掉被引用的部分）"""
    items = text.split(delimiter)
    return items[-1]


def compose_reply(question: str, answer: str) -> str:
    return f"{question}{ANSWER_SEPARATOR}{answer}"
