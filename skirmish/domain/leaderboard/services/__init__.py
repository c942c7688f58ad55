from .leaderboard_service import DEFAULT_TOP_N, LeaderboardService

__all__ = ["DEFAULT_TOP_N", "LeaderboardService"]
