"""User language lookup used by chat translation."""

from typing import Awaitable, Dict, Optional, Protocol, Union


class ProfileStore(Protocol):
    """Resolves a user id to the user's preferred language.

    Implementations may be synchronous or return an awaitable.
    """

    def get_user_language(self, user_id: str) -> Union[str, Awaitable[str]]:
        ...


class InMemoryProfileStore:
    """Profile store backed by a dict, for tests and the CLI."""

    def __init__(self, languages: Optional[Dict[str, str]] = None, default: str = "english"):
        self._languages: Dict[str, str] = dict(languages or {})
        self.default = default

    def set_user_language(self, user_id: str, language: str) -> None:
        self._languages[user_id] = language

    def get_user_language(self, user_id: str) -> str:
        return self._languages.get(user_id, self.default)
