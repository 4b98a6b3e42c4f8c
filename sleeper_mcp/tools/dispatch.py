"""Tool name -> Sleeper API request mapping.

Each tool maps to exactly one GET: a path built from its arguments plus an
optional flat query. Nothing here touches the network.
"""

from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData

from sleeper_mcp.tools.catalog import (
    DEFAULT_LOOKBACK_HOURS,
    DEFAULT_SPORT,
    DEFAULT_TRENDING_LIMIT,
)

Request = Tuple[str, Optional[Dict[str, Any]]]

_MISSING = object()


def _plain(value: Any) -> Any:
    """Render values the way the wire expects: 3.0 -> 3, True -> 'true'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _arg(name: str, arguments: Dict[str, Any], key: str, default: Any = _MISSING) -> Any:
    value = arguments.get(key)
    if value is None:
        if default is _MISSING:
            raise McpError(ErrorData(
                code=INVALID_PARAMS,
                message=f"Missing required argument '{key}' for tool {name}"
            ))
        value = default
    return _plain(value)


def _segment(name: str, arguments: Dict[str, Any], key: str, default: Any = _MISSING) -> str:
    return quote(str(_arg(name, arguments, key, default)), safe="")


def build_request(name: str, arguments: Optional[Dict[str, Any]] = None) -> Request:
    """Map a tool invocation to its upstream endpoint and query.

    Args:
        name: Tool name from the catalog
        arguments: Tool arguments, missing optionals take their defaults

    Returns:
        (endpoint, params) where params is None for path-only endpoints

    Raises:
        McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS when
            a required argument is absent
    """
    args = arguments or {}

    def seg(key: str, default: Any = _MISSING) -> str:
        return _segment(name, args, key, default)

    # ========== USER ==========
    if name == "get_user":
        return f"/user/{seg('user_id_or_name')}", None

    elif name == "get_user_leagues":
        return f"/user/{seg('user_id')}/leagues/{seg('sport', DEFAULT_SPORT)}/{seg('season')}", None

    # ========== LEAGUE ==========
    elif name == "get_league":
        return f"/league/{seg('league_id')}", None

    elif name == "get_rosters_in_league":
        return f"/league/{seg('league_id')}/rosters", None

    elif name == "get_users_in_league":
        return f"/league/{seg('league_id')}/users", None

    elif name == "get_matchups_in_league":
        return f"/league/{seg('league_id')}/matchups/{seg('week')}", None

    elif name == "get_league_winners_bracket":
        return f"/league/{seg('league_id')}/winners_bracket", None

    elif name == "get_league_losers_bracket":
        return f"/league/{seg('league_id')}/losers_bracket", None

    elif name == "get_transactions_in_league":
        return f"/league/{seg('league_id')}/transactions/{seg('week')}", None

    elif name == "get_traded_picks_in_league":
        return f"/league/{seg('league_id')}/traded_picks", None

    # ========== DRAFT ==========
    elif name == "get_user_drafts":
        return f"/user/{seg('user_id')}/drafts/{seg('sport', DEFAULT_SPORT)}/{seg('season')}", None

    elif name == "get_league_drafts":
        return f"/league/{seg('league_id')}/drafts", None

    elif name == "get_draft":
        return f"/draft/{seg('draft_id')}", None

    elif name == "get_draft_picks":
        return f"/draft/{seg('draft_id')}/picks", None

    elif name == "get_traded_picks_in_draft":
        return f"/draft/{seg('draft_id')}/traded_picks", None

    # ========== PLAYERS ==========
    elif name == "get_all_players":
        return f"/players/{seg('sport', DEFAULT_SPORT)}", None

    elif name == "get_trending_players":
        params = {
            "lookback_hours": _arg(name, args, "lookback_hours", DEFAULT_LOOKBACK_HOURS),
            "limit": _arg(name, args, "limit", DEFAULT_TRENDING_LIMIT),
        }
        return f"/players/{seg('sport', DEFAULT_SPORT)}/trending/{seg('type')}", params

    # ========== GENERAL ==========
    elif name == "get_nfl_state":
        return "/state/nfl", None

    raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))
