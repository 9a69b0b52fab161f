"""Import fixtures from authority.testing for test discovery."""

from authority.testing._fixtures import authority_config, isolated_authority_state

__all__ = ["authority_config", "isolated_authority_state"]
