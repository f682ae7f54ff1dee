"""
Profiles capability: stored customer payment profiles.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .codec import decode_object
from .request import CapabilityAPI
from .transport import HttpMethod
from .urls import PROFILES_URL, PROFILE_URL, resolve_url

__all__ = ["ProfilesAPI"]


class ProfilesAPI(CapabilityAPI):
    capability = "profiles"
    passcode_field = "profiles_api_passcode"

    def _send(self, method: HttpMethod, url: str, body: Any = None) -> Dict[str, Any]:
        return decode_object(self._request().process(method, url, body))

    def create_profile(self, profile: Mapping[str, Any]) -> Dict[str, Any]:
        url = resolve_url(PROFILES_URL, self.configuration)
        return self._send(HttpMethod.POST, url, dict(profile))

    def get_profile(self, profile_id: str) -> Dict[str, Any]:
        url = resolve_url(PROFILE_URL, self.configuration, profile_id)
        return self._send(HttpMethod.GET, url)

    def update_profile(self, profile_id: str, profile: Mapping[str, Any]) -> Dict[str, Any]:
        url = resolve_url(PROFILE_URL, self.configuration, profile_id)
        return self._send(HttpMethod.PUT, url, dict(profile))

    def delete_profile(self, profile_id: str) -> Dict[str, Any]:
        url = resolve_url(PROFILE_URL, self.configuration, profile_id)
        return self._send(HttpMethod.DELETE, url)
