import random


def get_rng() -> random.Random:
    """Fresh random source per request; tests override this dependency."""
    return random.Random()
