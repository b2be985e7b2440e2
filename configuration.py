#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging.config
import os
import shutil
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants import LEGACY_SERVICE_TAGS, ChatType

# 环境变量 -> router 配置项
ENV_OVERRIDES = {
    "BOT_NAME": "bot_name",
    "AUTO_REPLY_PREFIX": "auto_reply_prefix",
    "ALIAS_WHITELIST": "alias_whitelist",
    "ROOM_WHITELIST": "room_whitelist",
    "SERVICE_TYPE": "service_type",
}


def split_list(value) -> frozenset:
    """逗号分隔字符串或列表 -> 去空白后的集合"""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = value
    return frozenset(str(item).strip() for item in items if str(item).strip())


class RouterConfig(BaseModel):
    """消息路由配置，启动时构造一次，之后只读"""

    model_config = ConfigDict(frozen=True)

    bot_name: str = Field(..., min_length=1, description="机器人在群里被 @ 的形式，如 @小助手")
    auto_reply_prefix: str = Field(default="", description="AI 回复前缀，空串表示无前缀")
    alias_whitelist: frozenset[str] = Field(default_factory=frozenset)
    room_whitelist: frozenset[str] = Field(default_factory=frozenset)
    service_type: ChatType = ChatType.CHATGPT
    mode: Literal["default", "sharding"] = "default"
    ai_timeout: Optional[float] = Field(default=60.0, gt=0)

    @field_validator("auto_reply_prefix", mode="before")
    @classmethod
    def _empty_prefix(cls, value):
        return value or ""

    @field_validator("alias_whitelist", "room_whitelist", mode="before")
    @classmethod
    def _parse_list(cls, value):
        return split_list(value)

    @field_validator("service_type", mode="before")
    @classmethod
    def _parse_service_type(cls, value):
        if isinstance(value, str):
            tag = value.strip().upper()
            if tag.isdigit():
                return int(tag)
            if tag in LEGACY_SERVICE_TAGS:
                return LEGACY_SERVICE_TAGS[tag]
            if tag in ChatType.__members__:
                return ChatType[tag]
            raise ValueError(f"未知的服务类型: {value}，可用: {ChatType.help_hint()}")
        return value


class Config(object):
    def __init__(self, path: str = None) -> None:
        self.path = path
        self.reload()

    def _load_config(self) -> dict:
        if self.path:
            with open(self.path, "rb") as fp:
                return yaml.safe_load(fp) or {}

        pwd = os.path.dirname(os.path.abspath(__file__))
        try:
            with open(f"{pwd}/config.yaml", "rb") as fp:
                yconfig = yaml.safe_load(fp)
        except FileNotFoundError:
            shutil.copyfile(f"{pwd}/config.yaml.template", f"{pwd}/config.yaml")
            with open(f"{pwd}/config.yaml", "rb") as fp:
                yconfig = yaml.safe_load(fp)

        return yconfig or {}

    def reload(self) -> None:
        yconfig = self._load_config()
        if yconfig.get("logging"):
            logging.config.dictConfig(yconfig["logging"])

        router_conf = dict(yconfig.get("router") or {})
        for env_name, key in ENV_OVERRIDES.items():
            if env_name in os.environ:
                router_conf[key] = os.environ[env_name]

        self.ROUTER = RouterConfig.model_validate(router_conf)
        self.CHATGPT = yconfig.get("chatgpt", {}) or {}
        self.KIMI = yconfig.get("kimi", {}) or {}
