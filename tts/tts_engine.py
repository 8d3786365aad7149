from abc import ABC, abstractmethod
from typing import Optional, Tuple


class TTSEngine(ABC):
    @abstractmethod
    async def generate_speech(self, text: str, voice_id: str, rate: Optional[str] = None,
                              pitch: Optional[str] = None) -> Tuple[Optional[bytes], str]:
        pass

    async def close(self) -> None:
        return None
