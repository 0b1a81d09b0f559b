from punchsync.models.preferences import Preference, PreferenceKey

__all__ = ["Preference", "PreferenceKey"]
