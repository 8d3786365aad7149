from enum import Enum


class DJTone(Enum):
    ENERGETIC = "energetic"
    CHILL = "chill"
    WARM = "warm"
    SMOOTH = "smooth"
    EDGY = "edgy"

    @classmethod
    def from_value(cls, value: str):
        for tone in cls:
            if tone.value == value:
                return tone
        return cls.WARM

    def __str__(self):
        return self.value
