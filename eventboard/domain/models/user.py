from dataclasses import dataclass


@dataclass(frozen=True)
class SessionUser:
    """Signed-in user as exposed by the session provider"""
    id: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("User ID is required")
