"""Tests for the client event wiring."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import bot


@pytest.fixture
def crypto_bot(context):
    return bot.CryptoBot(context)


class TestCryptoBot:

    def test_message_content_intent_enabled(self, crypto_bot):
        assert crypto_bot.intents.message_content is True

    def test_tasks_share_context(self, crypto_bot, context):
        assert crypto_bot.crypto_tasks.context is context
        assert crypto_bot.crypto_tasks.client is crypto_bot

    @pytest.mark.asyncio
    async def test_on_message_delegates_to_command_handler(self, crypto_bot, context):
        message = MagicMock()
        with patch('bot.handle_crypto_command', AsyncMock(return_value=True)) as handler:
            await crypto_bot.on_message(message)
        handler.assert_awaited_once_with(message, crypto_bot.user, context)

    @pytest.mark.asyncio
    async def test_on_message_errors_are_logged(self, crypto_bot):
        with patch('bot.handle_crypto_command', AsyncMock(side_effect=RuntimeError('boom'))):
            await crypto_bot.on_message(MagicMock())

    @pytest.mark.asyncio
    async def test_on_error_only_logs(self, crypto_bot):
        await crypto_bot.on_error('on_message', 'arg', key='value')
