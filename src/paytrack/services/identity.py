"""Translation of external CRM user ids into internal user ids."""

from __future__ import annotations

import logging

from paytrack.core.exceptions import DirectoryError
from paytrack.core.protocols import ICacheBackend, IUserDirectory

logger = logging.getLogger(__name__)


class UserIdResolver:
    """Resolve external ids through a directory, remembering hits in ``cache``.

    Cached entries never expire; a miss or a failed lookup returns the
    external id unchanged and is not cached.
    """

    KEY_PREFIX = "user-id:"

    def __init__(self, *, directory: IUserDirectory, cache: ICacheBackend) -> None:
        self._directory = directory
        self._cache = cache

    def resolve(self, external_id: str) -> str:
        key = f"{self.KEY_PREFIX}{external_id}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            matches = self._directory.find_user_ids(external_id)
        except DirectoryError as exc:
            logger.warning("User id lookup failed for %s: %s", external_id, exc)
            return external_id

        if not matches:
            return external_id

        internal_id = matches[0]
        self._cache.set(key, internal_id)
        return internal_id
