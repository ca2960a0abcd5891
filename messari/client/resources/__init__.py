"""API resources exposed as attributes of :class:`messari.MessariClient`."""

from messari.client.resources.ai import AI
from messari.client.resources.asset import Asset
from messari.client.resources.diligence import Diligence
from messari.client.resources.fundraising import Fundraising
from messari.client.resources.intel import Intel
from messari.client.resources.metrics import Exchanges, Markets, Networks
from messari.client.resources.news import News
from messari.client.resources.recaps import Recaps
from messari.client.resources.research import Research
from messari.client.resources.signal import Signal
from messari.client.resources.token_unlocks import TokenUnlocks
from messari.client.resources.user_management import UserManagement

__all__ = [
    "AI",
    "Asset",
    "Diligence",
    "Exchanges",
    "Fundraising",
    "Intel",
    "Markets",
    "Networks",
    "News",
    "Recaps",
    "Research",
    "Signal",
    "TokenUnlocks",
    "UserManagement",
]
