from .static_session_provider import StaticSessionProvider

__all__ = ["StaticSessionProvider"]
