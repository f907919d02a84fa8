from .match import Match, MatchAny


__all__ = [
    "Match",
    "MatchAny",
]
