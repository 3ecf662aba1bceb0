"""Quality labels for tag confidence."""

# (lower_bound, label), highest first
QUALITY_LEVELS: tuple[tuple[float, str], ...] = (
    (0.9, "excellent"),
    (0.7, "good"),
    (0.5, "acceptable"),
)
LOWEST_QUALITY = "poor"


def evaluate_tag_quality(confidence: float) -> str:
    """Label a confidence score: excellent, good, acceptable or poor."""
    for lower_bound, label in QUALITY_LEVELS:
        if confidence >= lower_bound:
            return label
    return LOWEST_QUALITY
