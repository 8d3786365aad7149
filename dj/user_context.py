#!/usr/bin/env python3
# dj/user_context.py - turns visit history and taste data into a UserDJContext

import json
import logging
from datetime import datetime
from typing import Callable, List, Optional

from models.announcement import MAX_TOP_ARTISTS, UserDJContext
from repos.user_store import KeyValueStore

VISIT_COUNT_KEY = "sr_visit_count"
LAST_VISIT_KEY = "sr_last_visit"
TASTE_PROFILE_KEY = "spotify-radio-taste"


class UserContextBuilder:
    """
    Reads listener history from a key/value store.

    The visit counter is bumped once per builder instance; an instance lives
    as long as one listening session.
    """

    def __init__(self, store: KeyValueStore, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.clock = clock or datetime.now
        self.logger = logging.getLogger(__name__)
        self._session_visit_count: Optional[int] = None
        self._session_returning = False

    def build(self, user_name: Optional[str] = None) -> UserDJContext:
        top_artists = self._read_top_artists()

        try:
            visit_count, returning = self._register_visit()
        except (OSError, ValueError) as e:
            self.logger.warning(f"User store unavailable, treating listener as new: {e}")
            visit_count, returning = 1, False

        return UserDJContext(
            name=user_name or None,
            top_artists=top_artists,
            visit_count=visit_count,
            is_returning_user=returning
        )

    def _register_visit(self):
        if self._session_visit_count is not None:
            return self._session_visit_count, self._session_returning

        raw_count = self.store.get(VISIT_COUNT_KEY)
        previous_count = int(raw_count) if raw_count else 0
        last_visit = self.store.get(LAST_VISIT_KEY)

        visit_count = previous_count + 1
        # the session counts as registered even if persisting it fails below
        self._session_visit_count = visit_count
        self._session_returning = previous_count > 0 and bool(last_visit)

        try:
            self.store.set(VISIT_COUNT_KEY, str(visit_count))
            self.store.set(LAST_VISIT_KEY, self.clock().isoformat())
        except (OSError, ValueError) as e:
            self.logger.warning(f"Could not persist visit {visit_count}: {e}")

        self.logger.info(f"Visit {visit_count} (returning={self._session_returning})")
        return self._session_visit_count, self._session_returning

    def _read_top_artists(self) -> List[str]:
        try:
            raw = self.store.get(TASTE_PROFILE_KEY)
            if not raw:
                return []
            profile = json.loads(raw)
        except (OSError, ValueError) as e:
            self.logger.debug(f"Taste profile unreadable: {e}")
            return []

        if not isinstance(profile, dict):
            return []
        names = profile.get("likedArtistNames") or []
        if not isinstance(names, list):
            return []
        return [str(name) for name in names[:MAX_TOP_ARTISTS]]
