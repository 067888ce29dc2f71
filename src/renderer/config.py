"""
Configuration settings for the ray tracer
"""

# Lower bound of every scene query; keeps secondary rays off their own surface.
T_MIN = 0.001
T_MAX = float("inf")

# Rendering settings
RENDER_SETTINGS = {
    'width': 200,
    'height': 200,
    'samples_per_axis': 4,  # n x n multi-jittered samples per pixel
    'max_depth': 30,
    'seed': 42,
}

# Named presets that override RENDER_SETTINGS
QUALITY_LEVELS = {
    "preview": {"samples_per_axis": 1, "max_depth": 4},
    "balanced": {"samples_per_axis": 4, "max_depth": 10},
    "final": {"samples_per_axis": 10, "max_depth": 30},
}

# Sky gradient, from horizon to zenith
SKY_HORIZON = (0.33, 0.61, 0.72)
SKY_ZENITH = (0.9, 0.9, 0.72)


def settings_for(quality: str = None, **overrides) -> dict:
    """RENDER_SETTINGS merged with a quality preset and explicit overrides."""
    settings = dict(RENDER_SETTINGS)
    if quality is not None:
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {quality!r}; "
                             f"expected one of {sorted(QUALITY_LEVELS)}")
        settings.update(QUALITY_LEVELS[quality])
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return settings
