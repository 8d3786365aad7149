import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from models.station import StationProfile

DEFAULT_STATIONS_FILE = Path(__file__).parent.parent / "config" / "stations.yaml"


class StationCatalog:
    """Process-wide, read-only table of station profiles."""

    def __init__(self, stations: List[StationProfile]):
        if not stations:
            raise ValueError("StationCatalog requires at least one station")
        self.logger = logging.getLogger(__name__)
        self._stations: Dict[str, StationProfile] = {s.id: s for s in stations}
        self._default = stations[0]

    @classmethod
    def from_yaml(cls, path: Optional[Union[str, Path]] = None) -> 'StationCatalog':
        path = Path(path) if path else DEFAULT_STATIONS_FILE
        if not path.exists():
            raise FileNotFoundError(f"Stations file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        stations = [StationProfile.from_dict(item) for item in data.get("stations", [])]
        logging.getLogger(__name__).info(f"Loaded {len(stations)} stations from {path}")
        return cls(stations)

    @property
    def default(self) -> StationProfile:
        return self._default

    @property
    def ids(self) -> List[str]:
        return list(self._stations.keys())

    def get(self, station_id: Optional[str]) -> StationProfile:
        station = self._stations.get(station_id) if station_id else None
        if station is None:
            self.logger.debug(f"Unknown station '{station_id}', using {self._default.id}")
            return self._default
        return station

    def __contains__(self, station_id: str) -> bool:
        return station_id in self._stations

    def __iter__(self):
        return iter(self._stations.values())

    def __len__(self) -> int:
        return len(self._stations)
