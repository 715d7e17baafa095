"""
Roster Provider Adapters

Season rosters come either from the built-in season table or from a remote
JSON source over HTTP.
"""

import asyncio
import logging
from typing import Dict, List, Optional

import aiohttp

from ..application.interfaces import IRosterProvider
from ..domain.entities.contestant import Contestant, Season, SeasonInfo
from ..domain.exceptions import InvalidSelectionError, StorageUnavailableError

logger = logging.getLogger(__name__)


def _contestant(contestant_id: int, name: str, eliminated: bool = False) -> Contestant:
    image_name = name.lower().replace(" ", "-")
    return Contestant(
        id=contestant_id,
        name=name,
        image=f"/images/contestants/s48/{image_name}.jpg",
        eliminated=eliminated,
    )


SEASON_48 = Season(
    season_number=48,
    season_name="Survivor 48",
    contestants=[
        _contestant(1, "Bianca Roses"),
        _contestant(2, "Cedrek McFadden"),
        _contestant(3, "Charity Nelms"),
        _contestant(4, "Chrissy Sarnowsky"),
        _contestant(5, "David Kinne"),
        _contestant(6, "Eva Erickson"),
        _contestant(7, "Joe Hunter"),
        _contestant(8, "Justin Pioppi"),
        _contestant(9, "Kamilla Karthigesu"),
        _contestant(10, "Kevin Leung", eliminated=True),
        _contestant(11, "Kyle Fraser"),
        _contestant(12, "Mary Zheng"),
        _contestant(13, "Mitch Guerra"),
        _contestant(14, "Sai Hughley"),
        _contestant(15, "Shauhin Davari"),
        _contestant(16, "Star Toomey"),
        _contestant(17, "Stephanie Berger", eliminated=True),
        _contestant(18, "Thomas Krottinger"),
    ],
)


class StaticRosterProvider(IRosterProvider):
    """Roster provider over a fixed table of seasons"""

    def __init__(self, seasons: Optional[Dict[str, Season]] = None):
        self._seasons = seasons if seasons is not None else {"48": SEASON_48}

    async def get_season(self, season_id: str) -> Optional[Season]:
        season = self._seasons.get(str(season_id))
        if season is None:
            logger.error(f"Season data not found for {season_id}")
        return season

    async def get_all_seasons(self) -> List[SeasonInfo]:
        return [
            SeasonInfo(id=season_id, name=f"Season {season.season_number}: Survivor")
            for season_id, season in self._seasons.items()
        ]


class HttpRosterProvider(IRosterProvider):
    """
    Roster provider reading season JSON documents over HTTP.

    Expects ``<base_url>/seasons.json`` (a list of ``{id, name}``) and
    ``<base_url>/seasons/<id>.json`` in the season document shape.
    Loaded seasons are cached for the lifetime of the provider since
    rosters do not change during a draft.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None
        self._cache: Dict[str, Season] = {}

    async def initialize(self) -> None:
        """Initialize HTTP session"""
        if self._session and not self._session.closed:
            return
        self._session = aiohttp.ClientSession(timeout=self._timeout)
        logger.debug(f"{self.__class__.__name__} session initialized")

    async def close(self) -> None:
        """Close HTTP session"""
        if self._session:
            try:
                if not self._session.closed:
                    await self._session.close()
            except Exception as e:
                logger.error(f"Error closing {self.__class__.__name__} session: {e}")
            finally:
                self._session = None

    async def _fetch_json(self, url: str):
        """
        GET a JSON document.

        Returns:
            Parsed JSON, or None on HTTP 404

        Raises:
            StorageUnavailableError: on connection errors, timeouts, invalid JSON
                or other statuses
        """
        await self.initialize()
        try:
            async with self._session.get(url) as response:
                if response.status == 404:
                    return None
                if response.status != 200:
                    raise StorageUnavailableError(f"Roster request failed: {response.status}")
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Roster request to {url} failed: {e!r}")
            raise StorageUnavailableError("Roster source is unavailable") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise StorageUnavailableError("Roster source returned invalid data") from e

    async def get_season(self, season_id: str) -> Optional[Season]:
        season_id = str(season_id)
        if season_id in self._cache:
            return self._cache[season_id]

        data = await self._fetch_json(f"{self.base_url}/seasons/{season_id}.json")
        if data is None:
            logger.error(f"Season data not found for {season_id}")
            return None

        season = Season.from_dict(data)
        self._cache[season_id] = season
        return season

    async def get_all_seasons(self) -> List[SeasonInfo]:
        data = await self._fetch_json(f"{self.base_url}/seasons.json")
        if data is None:
            return []
        try:
            return [SeasonInfo(id=str(item["id"]), name=str(item["name"])) for item in data]
        except (KeyError, TypeError) as e:
            raise InvalidSelectionError(f"Malformed season listing: {e}") from e
