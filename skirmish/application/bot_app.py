from __future__ import annotations

import logging
from typing import List

from aiogram import Dispatcher
from aiogram.enums import ChatMemberStatus, ChatType
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from ..infrastructure.metrics import metrics
from .commands import COMMAND_NAMES, BotCommand, CommandSyntaxError, parse_command
from .container import AppContainer
from .pages import Page
from .workflow import BotWorkflow

ADMIN_STATUSES = {ChatMemberStatus.ADMINISTRATOR, ChatMemberStatus.CREATOR}


class TelegramBotApp:
    def __init__(self, container: AppContainer, *, max_message_length: int = 3800):
        self.container = container
        self.max_message_length = max_message_length
        self.workflow = BotWorkflow(
            players=container.players_service,
            matches=container.match_service,
            seasons=container.season_service,
            leaderboard=container.leaderboard_queries,
            broadcaster=container.broadcaster,
            presenter=container.presenter,
            leaderboard_size=container.config.leaderboard_size,
        )
        self._logger = logging.getLogger(__name__)

    def _cut_position(self, text: str) -> int:
        cut = self.max_message_length
        tag_start = text.rfind("<", 0, cut)
        # never split inside an HTML tag
        if tag_start > 0 and tag_start > text.rfind(">", 0, cut):
            return tag_start
        return cut

    def _chunk_text(self, text: str) -> List[str]:
        lines = text.split("\n")
        chunks: list[str] = []
        current = ""
        for line in lines:
            addition = line if not current else "\n" + line
            if len(current) + len(addition) > self.max_message_length:
                if current:
                    chunks.append(current)
                current = line
                while len(current) > self.max_message_length:
                    cut = self._cut_position(current)
                    chunks.append(current[:cut])
                    current = current[cut:]
            else:
                current += addition
        if current:
            chunks.append(current)
        return chunks

    async def _render_page(self, message: Message, page: Page) -> None:
        for chunk in self._chunk_text(page.text):
            await message.answer(
                chunk,
                parse_mode=page.parse_mode,
                disable_web_page_preview=page.disable_preview,
            )

    async def _is_admin(self, message: Message) -> bool:
        user = message.from_user
        if user is None:
            return False
        if str(user.id) in self.container.config.admin_ids:
            return True
        if message.chat.type not in (ChatType.GROUP, ChatType.SUPERGROUP):
            return False
        try:
            member = await message.bot.get_chat_member(message.chat.id, user.id)
        except TelegramAPIError:
            self._logger.warning("Could not check admin status of %s in chat %s", user.id, message.chat.id)
            return False
        return member.status in ADMIN_STATUSES

    def _format_user(self, message: Message) -> str:
        user = message.from_user
        if not user:
            return "unknown (id=?)"
        username = user.username or user.first_name or "unknown"
        return f"{username} (id={user.id})"

    async def _dispatch(self, message: Message, command: BotCommand) -> Page:
        if command.privileged and not await self._is_admin(message):
            self._logger.info("Rejected privileged command from %s", self._format_user(message))
            return self.container.presenter.permission_denied()
        return await self.workflow.handle(command, str(message.from_user.id))

    async def handle_command(self, message: Message, command: CommandObject) -> None:
        action_name = f"command:{command.command}"
        self._logger.info("User %s triggered %s", self._format_user(message), action_name)
        if message.from_user is None:
            return
        extra = {"user_id": message.from_user.id}
        async with metrics.span(action_name, source="telegram", extra=extra):
            try:
                parsed = parse_command(
                    command.command,
                    command.args,
                    default_season=self.container.config.default_season,
                )
            except CommandSyntaxError as exc:
                page = self.container.presenter.usage_page(exc.usage)
            else:
                page = await self._dispatch(message, parsed)
            await self._render_page(message, page)

    def build_dispatcher(self) -> Dispatcher:
        dp = Dispatcher()

        @dp.message(Command(*COMMAND_NAMES))
        async def on_command(message: Message, command: CommandObject):
            await self.handle_command(message, command)

        return dp
