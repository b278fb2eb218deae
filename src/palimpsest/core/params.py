"""
Visual parameter interpolation.

Eases the chaos maximum and blends each parameter between its baseline
and its fully-eroded value.
"""

from palimpsest.config import ErosionConfig, VisualParameters


def _lerp(start: float, stop: float, amount: float) -> float:
    return start + (stop - start) * amount


def ease_chaos(max_chaos: float, exponent: float = 1.4) -> float:
    return max_chaos ** exponent


def interpolate_parameters(
    max_chaos: float,
    config: ErosionConfig | None = None,
) -> VisualParameters:
    """
    Compute this frame's visual parameters.

    Args:
        max_chaos: Highest chaos level reached so far, in [0, 1].
        config: Erosion configuration. Uses defaults if None.

    Returns:
        VisualParameters equal to the baseline at 0 and to the maximum at 1.
    """
    cfg = config or ErosionConfig()
    eased = ease_chaos(max_chaos, cfg.easing_exponent)
    base, top = cfg.base_params, cfg.max_params

    return VisualParameters(
        distortion=_lerp(base.distortion, top.distortion, eased),
        glitch_prob=_lerp(base.glitch_prob, top.glitch_prob, eased),
        ghost_prob=_lerp(base.ghost_prob, top.ghost_prob, eased),
        min_alpha=_lerp(base.min_alpha, top.min_alpha, eased),
        max_alpha=_lerp(base.max_alpha, top.max_alpha, eased),
    )
