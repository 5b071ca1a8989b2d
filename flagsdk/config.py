"""Client configuration."""

from __future__ import annotations

from collections.abc import Iterable

PRIMARY_ENVIRONMENT_NAME = "default"

MIN_POLLING_INTERVAL_MILLIS = 30 * 1000
MIN_BACKGROUND_POLLING_INTERVAL_MILLIS = 15 * 60 * 1000


class Config:
    """Settings for a client; modify before handing it to a client.

    URI settings left as None mean the service's standard endpoints.
    """

    def __init__(
        self,
        mobile_key: str,
        *,
        all_attributes_private: bool = False,
        background_polling_interval_millis: int = 60 * 60 * 1000,
        app_uri: str | None = None,
        connection_timeout_millis: int = 10 * 1000,
        disable_background_updating: bool = False,
        events_capacity: int = 100,
        events_flush_interval_millis: int = 30 * 1000,
        events_uri: str | None = None,
        offline: bool = False,
        streaming: bool = True,
        polling_interval_millis: int = 5 * 60 * 1000,
        stream_uri: str | None = None,
        proxy_uri: str | None = None,
        verify_peer: bool = True,
        use_report: bool = False,
        use_reasons: bool = False,
        cert_file: str | None = None,
        inline_users_in_events: bool = False,
        auto_alias_opt_out: bool = False,
        request_timeout_millis: int = 30 * 1000,
    ) -> None:
        self.mobile_key = mobile_key
        self.all_attributes_private = all_attributes_private
        self.background_polling_interval_millis = background_polling_interval_millis
        self.app_uri = app_uri
        self.connection_timeout_millis = connection_timeout_millis
        self.disable_background_updating = disable_background_updating
        self.events_capacity = events_capacity
        self.events_flush_interval_millis = events_flush_interval_millis
        self.events_uri = events_uri
        self.offline = offline
        self.streaming = streaming
        self.polling_interval_millis = polling_interval_millis
        self.stream_uri = stream_uri
        self.proxy_uri = proxy_uri
        self.verify_peer = verify_peer
        self.use_report = use_report
        self.use_reasons = use_reasons
        self.cert_file = cert_file
        self.inline_users_in_events = inline_users_in_events
        self.auto_alias_opt_out = auto_alias_opt_out
        self.request_timeout_millis = request_timeout_millis
        self.private_attribute_names: list[str] = []
        self.secondary_mobile_keys: dict[str, str] = {}

    @property
    def mobile_key(self) -> str:
        return self._mobile_key

    @mobile_key.setter
    def mobile_key(self, key: str) -> None:
        if key is None:
            raise ValueError("a mobile key is required")
        self._mobile_key = key

    @property
    def polling_interval_millis(self) -> int:
        """Foreground polling interval; never below thirty seconds."""
        return self._polling_interval_millis

    @polling_interval_millis.setter
    def polling_interval_millis(self, millis: int) -> None:
        self._polling_interval_millis = max(millis, MIN_POLLING_INTERVAL_MILLIS)

    @property
    def background_polling_interval_millis(self) -> int:
        """Background polling interval; never below fifteen minutes."""
        return self._background_polling_interval_millis

    @background_polling_interval_millis.setter
    def background_polling_interval_millis(self, millis: int) -> None:
        self._background_polling_interval_millis = max(
            millis, MIN_BACKGROUND_POLLING_INTERVAL_MILLIS
        )

    def add_secondary_mobile_key(self, name: str, key: str) -> None:
        """Register another environment; names and keys must be unique."""
        if name is None or key is None:
            raise ValueError("both a name and a key are required")
        if name == PRIMARY_ENVIRONMENT_NAME or name in self.secondary_mobile_keys:
            raise ValueError(f"environment name {name!r} is already in use")
        if key == self.mobile_key or key in self.secondary_mobile_keys.values():
            raise ValueError("mobile key is already in use")
        self.secondary_mobile_keys[name] = key

    def set_private_attributes(self, attributes: Iterable[str]) -> None:
        """Replace the attribute names kept private for every user."""
        names = list(attributes)
        if not all(isinstance(attribute, str) for attribute in names):
            raise TypeError("private attribute names must be strings")
        self.private_attribute_names = names