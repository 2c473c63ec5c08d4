"""
Constants and display mappings used across the kill leaderboard bot.
"""

import discord

# =============================================================================
# Visual Branding
# =============================================================================

LEADERBOARD_COLOR = discord.Color(0x0099FF)
ERROR_COLOR = discord.Color(0xFF0000)

LEADERBOARD_TITLE = "Top 20 Players with the highest kill count"
LEADERBOARD_THUMBNAIL_URL = "https://imgur.com/cYkTFeF.png"
FOOTER_TEXT = "Last Refresh"
FOOTER_ICON_URL = "https://i.imgur.com/9Iaiwje.png"

ERROR_TITLE = "Error on retrieving player data"
ERROR_DESCRIPTION = "There was a problem handling the player data"

NO_DATA_DESCRIPTION = "No Player data available. Please try it again later."

# =============================================================================
# Leaderboard Layout
# =============================================================================

LEADERBOARD_SIZE = 20
MAX_LABEL_LENGTH = 44
ELLIPSIS = "..."
RANK_EMOJIS = ["🥇", "🥈", "🥉"]

# =============================================================================
# Schedule
# =============================================================================

POLL_INTERVAL_SECONDS = 15

# =============================================================================
# Role Display Names
# =============================================================================

# Unlisted role codes are shown as-is
ROLE_DISPLAY_NAMES = {
    "officer": "Officer",
    "spotter": "Spotter",
    "tankcommander": "Tank Commander",
    "armycommander": "Commander",
    "antitank": "Anti-Tank",
    "rifleman": "Rifleman",
    "medic": "Medic",
    "automaticrifleman": "Automatic Rifleman",
    "assault": "Assault",
    "support": "Support",
    "heavymachinegunner": "Machine Gunner",
    "sniper": "Sniper",
    "engineer": "Engineer",
    "crewman": "Crewman",
    "recon": "Sniper",
}


def get_role_display_name(role: str) -> str:
    """Translate a CRCON role code into its display title, passing unknown codes through."""
    return ROLE_DISPLAY_NAMES.get(role, role)
