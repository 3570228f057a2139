"""Random identifier generation."""

import random
import secrets
import string

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_LENGTH = 10

_system_random = secrets.SystemRandom()


def generate_unique_id(
    length: int = DEFAULT_LENGTH,
    *,
    alphabet: str = ALPHANUMERIC,
    rng: random.Random | None = None,
) -> str:
    """Generate a random identifier.

    Each character is drawn uniformly and independently from ``alphabet``.
    Uniqueness is probabilistic only; callers needing a guarantee must check
    for collisions themselves.

    Args:
        length: Number of characters. ``0`` yields an empty string.
        alphabet: Characters to draw from. Defaults to ``A-Za-z0-9``.
        rng: Random source. Defaults to the OS CSPRNG; pass a seeded
            ``random.Random`` for reproducible output.

    Returns:
        The generated identifier.

    Raises:
        ValueError: If ``length`` is negative or ``alphabet`` is empty.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = rng or _system_random
    return "".join(rng.choice(alphabet) for _ in range(length))
