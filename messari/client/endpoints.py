"""
Static descriptors for every Messari API operation.

Each descriptor records the HTTP method, the path template and the names of
the query and body parameters the operation accepts. Resource methods use
them to filter caller parameters so unknown keys never reach the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from messari.client.types import MessariError
from messari.utils import encode_component, pick


@dataclass(frozen=True)
class EndpointDescriptor:
    id: str
    method: str  # "GET" | "POST" | "PATCH" | "DELETE"
    path: str  # str.format template, e.g. "/intel/v1/events/{eventId}"
    path_params: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()
    body_params: tuple[str, ...] = ()

    def build_path(self, params: Mapping[str, Any] | None = None) -> str:
        values = pick(params, self.path_params)
        missing = [name for name in self.path_params if name not in values]
        if missing:
            raise MessariError(f"Missing path parameter(s) for {self.id}: {', '.join(missing)}")
        return self.path.format(**{name: encode_component(value) for name, value in values.items()})

    def query(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        return pick(params, self.query_params)

    def body(self, params: Mapping[str, Any] | None) -> dict[str, Any] | None:
        if not self.body_params:
            return None
        return pick(params, self.body_params)


def _get(
    endpoint_id: str,
    path: str,
    *,
    path_params: tuple[str, ...] = (),
    query: tuple[str, ...] = (),
) -> EndpointDescriptor:
    return EndpointDescriptor(id=endpoint_id, method="GET", path=path, path_params=path_params, query_params=query)


_TIMESERIES_PATH_PARAMS = ("entityIdentifier", "datasetSlug", "granularity")
_ASSET_FILTERS = ("ids", "slugs", "category", "sector", "tags", "search", "limit")
_FUNDING_FILTERS = (
    "fundedEntityId",
    "investorId",
    "type",
    "stage",
    "raisedAmountMax",
    "raisedAmountMin",
    "isTokenFunded",
    "announcedBefore",
    "announcedAfter",
    "page",
    "limit",
)
_ENTITY_FILTERS = ("id", "category", "sector", "tags", "foundedBefore", "foundedAfter", "page", "limit")


# ============================================================================
# AI
# ============================================================================

CREATE_CHAT_COMPLETION = EndpointDescriptor(
    id="createChatCompletion",
    method="POST",
    path="/ai/v1/chat/completions",
    body_params=("messages", "verbosity", "response_format", "stream"),
)

EXTRACT_ENTITIES = EndpointDescriptor(
    id="extractEntities",
    method="POST",
    path="/ai/v1/classification/extraction",
    body_params=("content", "entityTypes", "allSimilarEntities"),
)

# ============================================================================
# Assets (metrics v2)
# ============================================================================

GET_ASSETS_V2 = _get(
    "getAssetsV2",
    "/metrics/v2/assets",
    query=(
        "category",
        "sector",
        "tags",
        "search",
        "limit",
        "hasDiligence",
        "hasIntel",
        "hasMarketData",
        "hasNews",
        "hasProposals",
        "hasResearch",
        "hasTokenUnlocks",
        "hasFundraising",
    ),
)
GET_ASSET_DETAILS = _get("getAssetDetails", "/metrics/v2/assets/details", query=("ids", "slugs"))
GET_ASSETS_TIMESERIES_CATALOG = _get("getAssetsTimeseriesCatalog", "/metrics/v2/assets/metrics")
GET_ASSET_TIMESERIES = _get(
    "getAssetTimeseries",
    "/metrics/v2/assets/{entityIdentifier}/metrics/{datasetSlug}/time-series",
    path_params=("entityIdentifier", "datasetSlug"),
    query=("start", "end"),
)
GET_ASSET_TIMESERIES_WITH_GRANULARITY = _get(
    "getAssetTimeseriesWithGranularity",
    "/metrics/v2/assets/{entityIdentifier}/metrics/{datasetSlug}/time-series/{granularity}",
    path_params=_TIMESERIES_PATH_PARAMS,
    query=("start", "end"),
)
GET_ASSETS_ATH = _get("getAssetsV2ATH", "/metrics/v2/assets/ath", query=_ASSET_FILTERS)
GET_ASSETS_ROI = _get("getAssetsV2ROI", "/metrics/v2/assets/roi", query=_ASSET_FILTERS)

# ============================================================================
# Assets and asset market data (metrics v1)
# ============================================================================

GET_ASSET_LIST = _get(
    "getAssetList",
    "/metrics/v1/assets",
    query=("symbol", "category", "sector", "tags", "page", "limit"),
)
GET_ASSET_MARKETDATA = _get(
    "getAssetMarketdata",
    "/metrics/v1/assets/{assetId}/marketdata",
    path_params=("assetId",),
)
GET_ASSET_ROI = _get("getAssetROI", "/metrics/v1/assets/{assetId}/roi", path_params=("assetId",))
GET_ASSET_ATH = _get("getAssetATH", "/metrics/v1/assets/{assetId}/ath", path_params=("assetId",))
GET_ALL_ASSETS_ROI = _get("getAssetsROI", "/metrics/v1/assets/roi")
GET_ALL_ASSETS_ATH = _get("getAssetsATH", "/metrics/v1/assets/ath")

# ============================================================================
# Exchanges, markets, networks (metrics v1)
# ============================================================================

GET_EXCHANGES = _get("getExchanges", "/metrics/v1/exchanges", query=("type", "typeRankCutoff", "page", "pageSize"))
GET_EXCHANGE = _get(
    "getExchange",
    "/metrics/v1/exchanges/{exchangeIdentifier}",
    path_params=("exchangeIdentifier",),
)
GET_EXCHANGE_METRICS = _get("getExchangeMetrics", "/metrics/v1/exchanges/metrics")
GET_EXCHANGE_TIMESERIES = _get(
    "getExchangeTimeseries",
    "/metrics/v1/exchanges/{entityIdentifier}/metrics/{datasetSlug}/time-series/{granularity}",
    path_params=_TIMESERIES_PATH_PARAMS,
    query=("start", "end"),
)

GET_MARKETS = _get(
    "getMarkets",
    "/metrics/v1/markets",
    query=(
        "exchangeId",
        "exchangeSlug",
        "quoteAssetId",
        "quoteAssetSlug",
        "baseAssetId",
        "baseAssetSlug",
        "volume24hAbove",
        "volume24hBelow",
    ),
)
GET_MARKET = _get("getMarket", "/metrics/v1/markets/{marketIdentifier}", path_params=("marketIdentifier",))
GET_MARKET_METRICS = _get("getMarketMetrics", "/metrics/v1/markets/metrics")
GET_MARKET_TIMESERIES = _get(
    "getMarketTimeseries",
    "/metrics/v1/markets/{entityIdentifier}/metrics/{datasetSlug}/time-series/{granularity}",
    path_params=_TIMESERIES_PATH_PARAMS,
    query=("start", "end"),
)

GET_NETWORKS = _get("getNetworks", "/metrics/v1/networks", query=("page", "pageSize"))
GET_NETWORK = _get("getNetwork", "/metrics/v1/networks/{networkIdentifier}", path_params=("networkIdentifier",))
GET_NETWORK_METRICS = _get("getNetworkMetrics", "/metrics/v1/networks/metrics")
GET_NETWORK_TIMESERIES = _get(
    "getNetworkTimeseries",
    "/metrics/v1/networks/{entityIdentifier}/metrics/{datasetSlug}/time-series/{granularity}",
    path_params=_TIMESERIES_PATH_PARAMS,
    query=("start", "end"),
)

# ============================================================================
# Signal (social mindshare)
# ============================================================================

GET_SIGNAL_ASSETS = _get("getSignalAssets", "/signal/v1/assets", query=("page", "limit"))
GET_SIGNAL_INFLUENCERS = _get("getSignalInfluencers", "/signal/v1/influencers", query=("page", "limit"))

# ============================================================================
# Intel
# ============================================================================

GET_ALL_EVENTS = EndpointDescriptor(
    id="getAllEvents",
    method="POST",
    path="/intel/v1/events",
    body_params=(
        "page",
        "limit",
        "primaryAssets",
        "secondaryAssets",
        "primaryOrSecondaryAssets",
        "startTime",
        "endTime",
        "importance",
        "category",
        "subcategory",
        "tag",
        "status",
        "globalEvent",
    ),
)
GET_EVENT_AND_HISTORY = _get("getEventAndHistory", "/intel/v1/events/{eventId}", path_params=("eventId",))
GET_ALL_ASSETS = _get("getAllAssets", "/intel/v1/assets", query=("page", "limit", "symbol", "name"))

# ============================================================================
# News
# ============================================================================

GET_NEWS_FEED = _get(
    "getNewsFeed",
    "/news/v1/news/feed",
    query=("publishedBefore", "publishedAfter", "sourceTypes", "sourceIds", "assetIds", "sort", "limit", "page"),
)
GET_NEWS_FEED_ASSETS = _get("getNewsFeedAssets", "/news/v1/news/assets", query=("nameOrSymbol", "limit", "page"))
GET_NEWS_SOURCES = _get("getNewsSources", "/news/v1/news/sources", query=("sourceName", "limit", "page"))

# ============================================================================
# Recaps
# ============================================================================

GET_PROJECT_RECAP = _get("getProjectRecap", "/ai-digest/api/v1/recap", query=("project_id",))
GET_EXCHANGE_RECAP = _get("getExchangeRecap", "/ai-digest/api/v1/exchange-recap", query=("exchange_id",))
GET_EXCHANGE_RANKINGS_RECAP = _get(
    "getExchangeRankingsRecap",
    "/ai-digest/api/v1/exchange-rankings-recap",
    query=("period",),
)

# ============================================================================
# Research and diligence
# ============================================================================

GET_RESEARCH_REPORTS = _get(
    "getResearchReports",
    "/research/v1/reports",
    query=("page", "limit", "assetId", "tags", "contentType"),
)
GET_RESEARCH_REPORT_BY_ID = _get("getResearchReportById", "/research/v1/reports/{id}", path_params=("id",))
GET_RESEARCH_REPORT_TAGS = _get("getResearchReportTags", "/research/v1/reports/tags")

GET_DILIGENCE_PREVIEWS = _get(
    "getPreviews",
    "/diligence/v1/reports/preview",
    query=("sector", "isDefaultIncluded", "isPublished", "isPurchased", "sort", "order"),
)
GET_DILIGENCE_REPORT = _get(
    "getReportByAssetID",
    "/diligence/v1/report/asset/{assetId}",
    path_params=("assetId",),
)

# ============================================================================
# Fundraising
# ============================================================================

GET_FUNDING_ROUNDS = _get("getFundingRounds", "/funding/v1/rounds", query=_FUNDING_FILTERS)
GET_FUNDING_ROUNDS_INVESTORS = _get(
    "getFundingRoundsInvestors",
    "/funding/v1/rounds/investors",
    query=_FUNDING_FILTERS,
)
GET_ACQUISITION_DEALS = _get(
    "getAcquisitionDeals",
    "/funding/v1/mergers-and-acquisitions",
    query=(
        "acquiringEntityId",
        "acquiredEntityId",
        "transactionAmountMin",
        "transactionAmountMax",
        "announcedBefore",
        "announcedAfter",
        "page",
        "limit",
    ),
)
GET_ORGANIZATIONS = _get("getOrganizations", "/funding/v1/organizations", query=_ENTITY_FILTERS)
GET_PROJECTS = _get("getProjects", "/funding/v1/projects", query=_ENTITY_FILTERS)

# ============================================================================
# Token unlocks
# ============================================================================

GET_TOKEN_UNLOCK_SUPPORTED_ASSETS = _get(
    "getTokenUnlockSupportedAssets",
    "/token-unlocks/v1/assets",
    query=("assetIDs", "category", "sectors", "tags"),
)
GET_TOKEN_UNLOCK_ALLOCATIONS = _get("getTokenUnlockAllocations", "/token-unlocks/v1/allocations", query=("assetIDs",))
GET_TOKEN_UNLOCK_VESTING_SCHEDULE = _get(
    "getTokenUnlockVestingSchedule",
    "/token-unlocks/v1/assets/{assetId}/vesting-schedule",
    path_params=("assetId",),
    query=("startTime", "endTime"),
)
GET_TOKEN_UNLOCKS = _get(
    "getTokenUnlocks",
    "/token-unlocks/v1/assets/{assetId}/unlocks",
    path_params=("assetId",),
    query=("startTime", "endTime", "interval"),
)
GET_TOKEN_UNLOCK_EVENTS = _get(
    "getTokenUnlockEvents",
    "/token-unlocks/v1/assets/{assetId}/events",
    path_params=("assetId",),
    query=("startTime", "endTime"),
)

# ============================================================================
# User management
# ============================================================================

GET_TEAM_ALLOWANCE = _get("getTeamAllowance", "/user-management/v1/api/credits/allowance")
GET_PERMISSIONS = _get("getPermissions", "/user-management/v1/api/permissions")
LIST_WATCHLISTS = _get("listWatchlists", "/user-management/v1/watchlists")
GET_WATCHLIST = _get("getWatchlist", "/user-management/v1/watchlists/{id}", path_params=("id",))
CREATE_WATCHLIST = EndpointDescriptor(
    id="createWatchlist",
    method="POST",
    path="/user-management/v1/watchlists",
    body_params=("assetIds", "title"),
)
UPDATE_WATCHLIST = EndpointDescriptor(
    id="updateWatchlist",
    method="PATCH",
    path="/user-management/v1/watchlists/{id}",
    path_params=("id",),
    body_params=("assetIds", "title", "watchlistID"),
)
MODIFY_WATCHLIST_ASSETS = EndpointDescriptor(
    id="modifyWatchlistAssets",
    method="PATCH",
    path="/user-management/v1/watchlists/{id}/assets",
    path_params=("id",),
    body_params=("action", "assetIds", "watchlistID"),
)
DELETE_WATCHLIST = EndpointDescriptor(
    id="deleteWatchlist",
    method="DELETE",
    path="/user-management/v1/watchlists/{id}",
    path_params=("id",),
)
