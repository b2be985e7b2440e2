#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import time

import httpx
from openai import APIConnectionError, APIError, AuthenticationError, OpenAI


class CompletionError(Exception):
    """AI 服务调用失败"""


class OpenAICompatible:
    """兼容 OpenAI SDK 的对话服务基类"""

    DEFAULT_API = None
    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_PROMPT = "You are a helpful assistant."

    def __init__(self, conf: dict) -> None:
        key = conf.get("key")
        api = conf.get("api") or self.DEFAULT_API
        proxy = conf.get("proxy")
        prompt = conf.get("prompt")

        self.model = conf.get("model") or self.DEFAULT_MODEL
        self.LOG = logging.getLogger(repr(self))

        if proxy:
            self.client = OpenAI(api_key=key, base_url=api, http_client=httpx.Client(proxy=proxy))
        else:
            self.client = OpenAI(api_key=key, base_url=api)

        self.system_content_msg = {"role": "system", "content": prompt or self.DEFAULT_PROMPT}

    def __repr__(self) -> str:
        return self.__class__.__name__

    @staticmethod
    def value_check(conf: dict) -> bool:
        if conf and conf.get("key"):
            return True
        return False

    def get_answer(self, question: str) -> str:
        """单轮问答（阻塞调用）"""
        now_time = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        api_messages = [
            self.system_content_msg,
            {"role": "system", "content": f"Current time is: {now_time}"},
            {"role": "user", "content": question},
        ]

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=api_messages,
            )
        except AuthenticationError as e:
            self.LOG.error(f"{self!r} API 认证失败，请检查 API 密钥是否正确")
            raise CompletionError(f"{self!r} 认证失败") from e
        except APIConnectionError as e:
            self.LOG.error(f"无法连接到 {self!r} API，请检查网络或代理设置")
            raise CompletionError(f"{self!r} 连接失败") from e
        except APIError as e:
            self.LOG.error(f"{self!r} API 返回错误：{e}")
            raise CompletionError(f"{self!r} API 错误: {e}") from e

        message = response.choices[0].message
        return (message.content or "").strip()
