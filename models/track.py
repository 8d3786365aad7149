#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class Track:
    id: str
    title: str
    artist: str
    album: str = ""
    uri: str = ""
    duration_ms: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Track':
        # Spotify track objects carry artists/album as nested objects
        artists = data.get("artists") or []
        artist = artists[0].get("name", "") if artists else data.get("artist", "")
        album = data.get("album")
        album_name = album.get("name", "") if isinstance(album, dict) else (album or "")
        return cls(
            id=data.get("id", ""),
            title=data.get("name") or data.get("title", ""),
            artist=artist,
            album=album_name,
            uri=data.get("uri", ""),
            duration_ms=data.get("duration_ms", 0)
        )


@dataclass
class WeatherSnapshot:
    temp: float
    feels_like: float
    description: str
    city: str
    humidity: int = 0
    wind_speed: float = 0.0
    country: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherSnapshot':
        return cls(
            temp=float(data.get("temp", 0.0)),
            feels_like=float(data.get("feels_like", data.get("temp", 0.0))),
            description=data.get("description", ""),
            city=data.get("city", ""),
            humidity=int(data.get("humidity", 0)),
            wind_speed=float(data.get("wind_speed", 0.0)),
            country=data.get("country", "")
        )


@dataclass
class NewsItem:
    title: str
    description: str = ""
    source: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NewsItem':
        source = data.get("source")
        if isinstance(source, dict):
            source = source.get("name")
        return cls(
            title=data.get("title", ""),
            description=data.get("description") or "",
            source=source,
            url=data.get("url")
        )
