"""Animation layer for pytiles.

- Easing curves shaping how a transition accelerates and settles
- TransitionController: per-item interpolation towards arrangement targets
"""

from pytiles.animation.easing import EASINGS, Easing, exponential_in_out, get_easing, linear, smoothstep
from pytiles.animation.transition import Transition, TransitionController

__all__ = [
    "EASINGS",
    "Easing",
    "Transition",
    "TransitionController",
    "exponential_in_out",
    "get_easing",
    "linear",
    "smoothstep",
]
