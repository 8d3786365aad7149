from enum import Enum


class DJFrequency(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

    @classmethod
    def from_value(cls, value: str):
        for frequency in cls:
            if frequency.value == value:
                return frequency
        return cls.NORMAL

    def __str__(self):
        return self.value
