#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from .base import OpenAICompatible


class Kimi(OpenAICompatible):
    """Moonshot Kimi provider (兼容OpenAI SDK)"""

    DEFAULT_API = "https://api.moonshot.cn/v1"
    DEFAULT_MODEL = "kimi-k2"
    DEFAULT_PROMPT = "你是 Kimi，一个由 Moonshot AI 打造的贴心助手。"


__all__ = ["Kimi"]
