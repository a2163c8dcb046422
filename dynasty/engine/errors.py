class ScoreValidationError(ValueError):
    """Raised when a reported final score is rejected. State is left unchanged."""

    pass


class TiedScoreError(ScoreValidationError):
    """Both teams reported the same score; ties must be resolved before reporting."""

    pass


class InvalidScoreError(ScoreValidationError):
    """A score was not a non-negative integer."""

    pass


class SameTeamError(ScoreValidationError):
    """Both sides of a reported game normalize to the same team."""

    pass
