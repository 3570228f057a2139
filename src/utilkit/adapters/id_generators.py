"""ID generators for utilkit."""

import random
import uuid

from utilkit.interfaces.id_generator import IdGenerator
from utilkit.utils.ids import ALPHANUMERIC, DEFAULT_LENGTH, generate_unique_id

# pylint: disable=too-few-public-methods


class RandomStringIdGenerator(IdGenerator):
    """Random fixed-length identifiers drawn from an alphabet.

    Identifiers are not ordered and uniqueness is only probabilistic: with the
    default 62-character alphabet and length 10 there are about 8.4e17
    possible values.
    """

    def __init__(
        self,
        length: int = DEFAULT_LENGTH,
        alphabet: str = ALPHANUMERIC,
        rng: random.Random | None = None,
    ) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self._length = length
        self._alphabet = alphabet
        self._rng = rng

    def new_id(self) -> str:
        """Generate a new random identifier."""
        return generate_unique_id(self._length, alphabet=self._alphabet, rng=self._rng)


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())
