"""
关键字命令规则

每条规则由匹配函数和处理函数组成。匹配函数返回参数字典（匹配成功）
或 None（不匹配，继续尝试下一条规则）。
"""

import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

Captures = Dict[str, Any]
Matcher = Callable[[str], Optional[Captures]]
Shape = Callable[[str], Optional[Captures]]

DEFAULT_GAMES = 10

_DIGITS = re.compile(r"[0-9]+")
_PAIR_SEP = re.compile(r"[\s_]+")


@dataclass(frozen=True)
class CommandRule:
    name: str
    match: Matcher
    handler: Callable[..., Awaitable[Optional[str]]]
    defaults_to_self: bool = False  # 参数 nickname 为空时用发送者昵称


def exact(word: str) -> Matcher:
    def _match(text: str) -> Optional[Captures]:
        return {} if text == word else None
    return _match


def contains(word: str) -> Matcher:
    def _match(text: str) -> Optional[Captures]:
        return {} if word in text else None
    return _match


def prefix(word: str, shape: Shape) -> Matcher:
    """以 word 开头，剩余部分（去掉首尾空白）交给 shape 校验"""
    def _match(text: str) -> Optional[Captures]:
        if not text.startswith(word):
            return None
        return shape(text[len(word):].strip())
    return _match


# ---- 参数形状 ----

def numeric(rest: str) -> Optional[Captures]:
    if _DIGITS.fullmatch(rest):
        return {"limit": int(rest)}
    return None


def nickname(rest: str) -> Optional[Captures]:
    if rest:
        return {"nickname": rest}
    return None


def optional_nickname(rest: str) -> Optional[Captures]:
    return {"nickname": rest or None}


def stats_args(rest: str) -> Optional[Captures]:
    """昵称 [场数]，场数缺省或不是数字时取 DEFAULT_GAMES"""
    params = rest.split()
    if not params:
        return None
    games = DEFAULT_GAMES
    if len(params) > 1 and _DIGITS.fullmatch(params[1]):
        games = int(params[1])
    return {"nickname": params[0], "games": games}


def pair(rest: str) -> Optional[Captures]:
    """两个昵称，空白或下划线分隔

    空段会被丢弃，"VP_" 只算一个昵称，不匹配（不会用空昵称去查询）。
    """
    params = [p for p in _PAIR_SEP.split(rest) if p]
    if len(params) < 2:
        return None
    return {"nickname1": params[0], "nickname2": params[1]}
