import time
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
from openai import APIConnectionError

from ai_providers import ChatGPT, CompletionError, CompletionService, Kimi
from ai_providers.service import PROVIDER_CLASSES
from constants import ChatType

from tests.helpers import make_config


class _EchoProvider:
    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.questions: list[str] = []

    def get_answer(self, question: str) -> str:
        self.questions.append(question)
        time.sleep(self.delay)
        return f"echo: {question}"


def _completion_response(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class TestCompletionService(unittest.IsolatedAsyncioTestCase):
    async def test_routes_by_service_type(self) -> None:
        gpt, kimi = _EchoProvider(), _EchoProvider()
        service = CompletionService({ChatType.CHATGPT: gpt, ChatType.KIMI: kimi})

        self.assertEqual(await service.get_reply("hi", ChatType.KIMI), "echo: hi")
        self.assertEqual(kimi.questions, ["hi"])
        self.assertEqual(gpt.questions, [])

    async def test_unconfigured_or_unknown_service(self) -> None:
        service = CompletionService({ChatType.CHATGPT: _EchoProvider()})
        with self.assertRaises(CompletionError):
            await service.get_reply("hi", ChatType.KIMI)
        with self.assertRaises(CompletionError):
            await service.get_reply("hi", 42)

    async def test_timeout_raises_completion_error(self) -> None:
        service = CompletionService({ChatType.CHATGPT: _EchoProvider(delay=0.5)}, timeout=0.05)
        with self.assertRaises(CompletionError):
            await service.get_reply("slow", ChatType.CHATGPT)

    def test_every_chat_type_has_a_provider(self) -> None:
        self.assertEqual(set(PROVIDER_CLASSES), set(ChatType))

    def test_from_config_only_loads_configured_providers(self) -> None:
        config = SimpleNamespace(
            ROUTER=make_config(service_type="Kimi", ai_timeout=12),
            CHATGPT={"key": "sk-test"},  # 缺少 api，不加载
            KIMI={"key": "sk-kimi"},
        )
        service = CompletionService.from_config(config)
        self.assertEqual(set(service.providers), {ChatType.KIMI})
        self.assertIsInstance(service.providers[ChatType.KIMI], Kimi)
        self.assertEqual(service.providers[ChatType.KIMI].model, "kimi-k2")
        self.assertEqual(service.timeout, 12)


class TestOpenAICompatible(unittest.TestCase):
    def test_get_answer_sends_prompt_and_question(self) -> None:
        provider = ChatGPT({"key": "sk-test", "api": "https://example.invalid/v1", "prompt": "你是小助手"})
        provider.client = MagicMock()
        provider.client.chat.completions.create.return_value = _completion_response("  你好  \n")

        self.assertEqual(provider.get_answer("在吗"), "你好")
        kwargs = provider.client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4o-mini")
        self.assertEqual(kwargs["messages"][0], {"role": "system", "content": "你是小助手"})
        self.assertEqual(kwargs["messages"][-1], {"role": "user", "content": "在吗"})

    def test_sdk_errors_become_completion_errors(self) -> None:
        provider = Kimi({"key": "sk-test"})
        provider.client = MagicMock()
        request = httpx.Request("POST", "https://api.moonshot.cn/v1/chat/completions")
        provider.client.chat.completions.create.side_effect = APIConnectionError(request=request)

        with self.assertLogs("Kimi", level="ERROR"):
            with self.assertRaises(CompletionError):
                provider.get_answer("在吗")

    def test_value_check(self) -> None:
        self.assertFalse(ChatGPT.value_check({"key": "sk"}))
        self.assertTrue(ChatGPT.value_check({"key": "sk", "api": "https://api.openai.com/v1"}))
        self.assertTrue(Kimi.value_check({"key": "sk"}))
        self.assertFalse(Kimi.value_check({}))


if __name__ == "__main__":
    unittest.main()
