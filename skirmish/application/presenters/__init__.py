from .bot_presenter import BotPresenter, VALIDATION_MESSAGES

__all__ = ["BotPresenter", "VALIDATION_MESSAGES"]
