import random
import string

from .errors import CodeSpaceExhausted

ROOM_CODE_ALPHABET = string.ascii_uppercase
ROOM_CODE_LENGTH = 4


class RoomCodeGenerator:
    """Short human-typed room codes, unique against a set of taken codes.

    The caller holds the RoomStore lock while generating and inserting, so a
    code returned here cannot be claimed by another room in between.
    """

    def __init__(self, length=ROOM_CODE_LENGTH, alphabet=ROOM_CODE_ALPHABET, rng=None):
        if length < 1:
            raise ValueError('length must be >= 1')
        if not alphabet:
            raise ValueError('alphabet must not be empty')
        self.length = length
        self.alphabet = alphabet
        self._rng = rng or random.SystemRandom()

    @property
    def capacity(self):
        return len(self.alphabet) ** self.length

    def candidate(self):
        return ''.join(self._rng.choice(self.alphabet) for _ in range(self.length))

    def generate(self, taken=()):
        if len(taken) >= self.capacity:
            raise CodeSpaceExhausted()
        while True:
            code = self.candidate()
            if code not in taken:
                return code
