# ai_providers/ai_chatgpt.py
#! /usr/bin/env python3
# -*- coding: utf-8 -*-

from .base import OpenAICompatible


class ChatGPT(OpenAICompatible):
    DEFAULT_API = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_PROMPT = "You are a helpful assistant."

    @staticmethod
    def value_check(conf: dict) -> bool:
        # 不检查 prompt，可以没有默认 prompt
        if conf:
            if conf.get("key") and conf.get("api"):
                return True
        return False


__all__ = ["ChatGPT"]
