"""Static catalog of Sleeper MCP tools.

The list is built once at import time and returned as-is on every
tools/list request, so order is stable for the life of the process.
"""

from typing import List

from mcp.types import Tool

DEFAULT_SPORT = "nfl"
DEFAULT_LOOKBACK_HOURS = 24
DEFAULT_TRENDING_LIMIT = 25

TRENDING_TYPES = ["add", "drop"]

# Shared parameter schemas
_USER_ID = {"type": "string", "description": "The ID of the user"}
_LEAGUE_ID = {"type": "string", "description": "The ID of the league"}
_DRAFT_ID = {"type": "string", "description": "The ID of the draft"}
_WEEK = {"type": "number", "description": "The week number"}
_SEASON = {"type": "string", "description": "The season (e.g., 2024)"}
_SPORT = {"type": "string", "description": "The sport (e.g., nfl)", "default": DEFAULT_SPORT}


def _league_only(name: str, description: str) -> Tool:
    return Tool(
        name=name,
        description=description,
        inputSchema={
            "type": "object",
            "properties": {"league_id": dict(_LEAGUE_ID)},
            "required": ["league_id"]
        }
    )


def _draft_only(name: str, description: str) -> Tool:
    return Tool(
        name=name,
        description=description,
        inputSchema={
            "type": "object",
            "properties": {"draft_id": dict(_DRAFT_ID)},
            "required": ["draft_id"]
        }
    )


TOOLS: List[Tool] = [
    # ========== USER TOOLS ==========
    Tool(
        name="get_user",
        description="Get user information by username or user ID",
        inputSchema={
            "type": "object",
            "properties": {
                "user_id_or_name": {
                    "type": "string",
                    "description": "The username or user ID of the user"
                }
            },
            "required": ["user_id_or_name"]
        }
    ),
    Tool(
        name="get_user_leagues",
        description="Get all leagues for a user in a given season",
        inputSchema={
            "type": "object",
            "properties": {
                "user_id": dict(_USER_ID),
                "sport": dict(_SPORT),
                "season": dict(_SEASON)
            },
            "required": ["user_id", "season"]
        }
    ),

    # ========== LEAGUE TOOLS ==========
    _league_only("get_league", "Get league information by league ID"),
    _league_only("get_rosters_in_league", "Get all rosters for a given league ID"),
    _league_only("get_users_in_league", "Get all users for a given league ID"),
    Tool(
        name="get_matchups_in_league",
        description="Get all matchups for a given week in a league",
        inputSchema={
            "type": "object",
            "properties": {
                "league_id": dict(_LEAGUE_ID),
                "week": dict(_WEEK)
            },
            "required": ["league_id", "week"]
        }
    ),
    _league_only("get_league_winners_bracket", "Get the winners playoff bracket for a league"),
    _league_only("get_league_losers_bracket", "Get the losers playoff bracket for a league"),
    Tool(
        name="get_transactions_in_league",
        description="Get all transactions for a given week in a league",
        inputSchema={
            "type": "object",
            "properties": {
                "league_id": dict(_LEAGUE_ID),
                "week": dict(_WEEK)
            },
            "required": ["league_id", "week"]
        }
    ),
    _league_only("get_traded_picks_in_league", "Get all traded picks in a league"),

    # ========== DRAFT TOOLS ==========
    Tool(
        name="get_user_drafts",
        description="Get all drafts for a user in a given season",
        inputSchema={
            "type": "object",
            "properties": {
                "user_id": dict(_USER_ID),
                "season": dict(_SEASON),
                "sport": dict(_SPORT)
            },
            "required": ["user_id", "season"]
        }
    ),
    _league_only("get_league_drafts", "Get all drafts for a given league ID"),
    _draft_only("get_draft", "Get a specific draft by its ID"),
    _draft_only("get_draft_picks", "Get all picks in a specific draft"),
    _draft_only("get_traded_picks_in_draft", "Get all traded picks in a specific draft"),

    # ========== PLAYER TOOLS ==========
    Tool(
        name="get_all_players",
        description="Get all players for a given sport",
        inputSchema={
            "type": "object",
            "properties": {
                "sport": dict(_SPORT)
            },
            "required": ["sport"]
        }
    ),
    Tool(
        name="get_trending_players",
        description="Get trending players (adds or drops)",
        inputSchema={
            "type": "object",
            "properties": {
                "sport": dict(_SPORT),
                "type": {
                    "type": "string",
                    "description": "`add` or `drop`",
                    "enum": list(TRENDING_TYPES)
                },
                "lookback_hours": {
                    "type": "number",
                    "description": "Hours to look back",
                    "default": DEFAULT_LOOKBACK_HOURS
                },
                "limit": {
                    "type": "number",
                    "description": "Number of players to return",
                    "default": DEFAULT_TRENDING_LIMIT
                }
            },
            "required": ["type"]
        }
    ),

    # ========== GENERAL TOOLS ==========
    Tool(
        name="get_nfl_state",
        description="Get the current state of the NFL season",
        inputSchema={
            "type": "object",
            "properties": {},
            "required": []
        }
    ),
]

TOOL_NAMES = [tool.name for tool in TOOLS]


def list_tools() -> List[Tool]:
    """Return the tool catalog, same objects in the same order on every call."""
    return TOOLS
