from .leaderboard import LeaderboardListing, LeaderboardQueryService, RankedEntry

__all__ = ["LeaderboardListing", "LeaderboardQueryService", "RankedEntry"]
