import asyncio
import logging
import os

from dotenv import load_dotenv
from aiogram import Bot

from .application.bot_app import TelegramBotApp
from .application.bootstrap import bootstrap_app
from .application.container import AppConfig
from .domain import DEFAULT_SEASON
from .infrastructure.telegram import TelegramMessageSender

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no"}


def load_app_config() -> AppConfig:
    bot_token = os.getenv("BOT_TOKEN", "").strip()
    if not bot_token:
        raise RuntimeError("BOT_TOKEN is empty. Put it to .env")
    admin_ids_raw = os.getenv("ADMIN_IDS", "").strip()
    admin_ids = frozenset(
        item.strip()
        for item in admin_ids_raw.split(",")
        if item.strip()
    )
    leaderboard_size = int(os.getenv("LEADERBOARD_SIZE", "10"))
    if leaderboard_size <= 0:
        raise RuntimeError("LEADERBOARD_SIZE must be positive")
    config = AppConfig(
        bot_token=bot_token,
        db_path=os.getenv("DB_PATH", "/data/skirmish.db"),
        admin_ids=admin_ids,
        default_season=os.getenv("DEFAULT_SEASON", DEFAULT_SEASON).strip() or DEFAULT_SEASON,
        leaderboard_size=leaderboard_size,
        broadcast_targets_path=os.getenv("BROADCAST_TARGETS_PATH", "broadcast.yaml"),
        health_enabled=_flag("HEALTH_ENABLED"),
        health_host=os.getenv("HEALTH_HOST", "0.0.0.0"),
        health_port=int(os.getenv("PORT", "8080")),
        metrics_log_path=os.getenv("METRICS_LOG_PATH", "").strip() or None,
    )
    logger.info(
        "Config loaded: db_path=%s, admins=%s, default_season=%s, leaderboard_size=%s, "
        "broadcast_targets=%s, health=%s",
        config.db_path,
        len(config.admin_ids),
        config.default_season,
        config.leaderboard_size,
        config.broadcast_targets_path,
        f"{config.health_host}:{config.health_port}" if config.health_enabled else "off",
    )
    return config


async def main():
    config = load_app_config()
    logger.info("Bootstrapping application")
    async with bootstrap_app(config) as container:
        logger.info("Building Telegram bot application")
        bot_app = TelegramBotApp(container)
        bot = Bot(config.bot_token)
        container.broadcaster.attach(TelegramMessageSender(bot))
        dp = bot_app.build_dispatcher()
        logger.info("Starting polling loop")
        try:
            await dp.start_polling(bot)
        except Exception:
            logger.exception("Polling stopped due to unexpected error")
            raise
        finally:
            await bot.session.close()
            logger.info("Polling loop finished")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user, shutting down")


if __name__ == "__main__":
    run()
