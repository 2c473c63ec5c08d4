"""
Exceptions raised by the leaderboard pipeline.
"""


class LeaderboardError(Exception):
    """Base class for leaderboard pipeline failures."""


class UpstreamError(LeaderboardError):
    """The stats API could not be reached, answered with an error status, or returned unreadable data."""


class ChannelNotFoundError(LeaderboardError):
    """The configured leaderboard channel is not visible to the bot."""

    def __init__(self, channel_id: int) -> None:
        super().__init__(f"Channel {channel_id} not found")
        self.channel_id = channel_id


class PublishError(LeaderboardError):
    """Sending the leaderboard message to Discord failed."""
