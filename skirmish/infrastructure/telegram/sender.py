from __future__ import annotations

from aiogram import Bot

from ..metrics import metrics


class TelegramMessageSender:
    def __init__(self, bot: Bot, *, parse_mode: str = "HTML"):
        self._bot = bot
        self._parse_mode = parse_mode

    @metrics.track("telegram:broadcast.send", source="telegram")
    async def send(self, destination: str, text: str) -> None:
        await self._bot.send_message(
            int(destination),
            text,
            parse_mode=self._parse_mode,
            disable_web_page_preview=True,
        )
