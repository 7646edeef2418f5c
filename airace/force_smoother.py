"""
Rate limiting of control forces.

An automated driver should not be able to jump from one side of the wheel to the other.
A keyboard or joystick axis does this gradual change naturally, so the applied force follows
the requested target force by at most `rate` per tick, like a keyboard axis does.
"""
from airace.airace_utils import clamp


def smooth(current: float, target: float, rate: float) -> float:
    """
    Moves an applied force toward a target force by at most rate.

    :param current: the currently applied force
    :param target: the requested force, may lie outside -1:1
    :param rate: the max change for this call

    :returns: the new applied force, clamped to -1:1
    """
    if target > current and (target - current) < rate:
        force = target
    elif target > current:
        force = current + rate
    elif target < current and (current - target) < rate:
        force = target
    elif target < current:
        force = current - rate
    else:
        force = current

    return clamp(force, -1., 1.)
