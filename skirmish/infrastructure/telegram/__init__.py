from .sender import TelegramMessageSender

__all__ = ["TelegramMessageSender"]
