from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from pydantic import ValidationError

from ramplo.client.api_client import ApiClient, ApiError
from ramplo.client.query_cache import QueryCache
from ramplo.schemas.user_schema import AuthUserResponse, User, UserProfile
from ramplo.schemas.progress_schema import UserProgress

logger = logging.getLogger(__name__)

AUTH_QUERY_KEY = "/api/auth/user"


class AuthError(Exception):
    pass


class Unauthenticated(AuthError):
    """The server answered and there is no signed-in user."""


class TransientFetchError(AuthError):
    """The snapshot could not be fetched; the user may still be signed in."""


class AuthStatus(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    ERROR = "error"


@dataclass(frozen=True)
class AuthSnapshot:
    user: Optional[User] = None
    profile: Optional[UserProfile] = None
    progress: Optional[UserProgress] = None
    is_loading: bool = False
    error: Optional[AuthError] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_morty_user(self) -> bool:
        return bool(self.user and self.user.is_morty_user)

    @property
    def status(self) -> AuthStatus:
        if self.is_loading:
            return AuthStatus.LOADING
        if self.user is not None:
            return AuthStatus.AUTHENTICATED
        if isinstance(self.error, TransientFetchError):
            return AuthStatus.ERROR
        return AuthStatus.UNAUTHENTICATED


class AuthContextReader:
    def __init__(self, api: ApiClient, cache: QueryCache):
        self.api = api
        self.cache = cache
        self._last_error: Optional[AuthError] = None

    async def _fetch(self) -> AuthUserResponse:
        data = await self.api.get(AUTH_QUERY_KEY)
        return AuthUserResponse.model_validate(data)

    async def get_auth_snapshot(self) -> AuthSnapshot:
        """Read user, profile and progress in one request, without retrying."""
        try:
            data = await self.cache.fetch(AUTH_QUERY_KEY, self._fetch)
        except ApiError as e:
            if e.status_code in (401, 403, 404):
                self._last_error = Unauthenticated(str(e))
            else:
                logger.warning(f"[Auth] Snapshot fetch failed: {e}")
                self._last_error = TransientFetchError(str(e))
            return AuthSnapshot(error=self._last_error)
        except ValidationError as e:
            logger.warning(f"[Auth] Malformed snapshot: {e}")
            self._last_error = TransientFetchError(str(e))
            return AuthSnapshot(error=self._last_error)

        self._last_error = None
        return self._to_snapshot(data)

    def current(self) -> AuthSnapshot:
        """Snapshot of what is cached right now, without fetching.

        A failed latest fetch wins over stale cached data.
        """
        data = self.cache.get(AUTH_QUERY_KEY)
        is_loading = self.cache.is_fetching(AUTH_QUERY_KEY)
        if data is None or self._last_error is not None:
            return AuthSnapshot(is_loading=is_loading, error=self._last_error)
        return self._to_snapshot(data, is_loading)

    @staticmethod
    def _to_snapshot(data: AuthUserResponse, is_loading: bool = False) -> AuthSnapshot:
        return AuthSnapshot(
            user=data.user,
            profile=data.profile,
            progress=data.progress,
            is_loading=is_loading,
        )
