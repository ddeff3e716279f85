from config.settings import Strategy

from .fixed_controller import FixedTimeController
from .adaptive_controller import AdaptiveController

CONTROLLERS = {
    Strategy.FIXED: FixedTimeController,
    Strategy.ADAPTIVE: AdaptiveController,
}


def make_controller(strategy, timing=None):
    """Build the allocation policy for *strategy* (a Strategy or its name)."""
    return CONTROLLERS[Strategy(strategy)](timing)
