"""
AI Providers Module

这个包包含了与各种 AI 服务提供商的集成实现。
"""

from .ai_chatgpt import ChatGPT
from .ai_kimi import Kimi
from .base import CompletionError
from .service import CompletionService

__all__ = ["ChatGPT", "Kimi", "CompletionError", "CompletionService"]
