from typing import Dict, List

from cnst.time_of_day import TimeOfDay

TIME_ADVICE: Dict[TimeOfDay, List[str]] = {
    TimeOfDay.MORNING: ["Een mooie start van de dag!", "Geniet van je ochtend!", "Nog even doorzetten naar de lunch!"],
    TimeOfDay.AFTERNOON: ["De middag is al weer begonnen!", "Lekker doorwerken met goede muziek!", "De middag vliegt voorbij!"],
    TimeOfDay.EVENING: ["Geniet van je avond!", "Lekker relaxen met muziek!", "De avond is van jou!"],
    TimeOfDay.NIGHT: ["Nog even wakker? Geniet van de muziek!", "Nachtbrakers, deze is voor jullie!", "De nacht is nog jong!"],
}

PART_OF_DAY_WORD = {
    TimeOfDay.MORNING: "dag",
    TimeOfDay.AFTERNOON: "middag",
    TimeOfDay.EVENING: "avond",
    TimeOfDay.NIGHT: "nacht",
}

WEATHER_TRANSLATIONS: Dict[str, str] = {
    "clear sky": "Heldere lucht",
    "few clouds": "Licht bewolkt",
    "scattered clouds": "Gedeeltelijk bewolkt",
    "broken clouds": "Zwaar bewolkt",
    "overcast clouds": "Geheel bewolkt",
    "shower rain": "Buien",
    "rain": "Regen",
    "light rain": "Lichte regen",
    "moderate rain": "Matige regen",
    "heavy intensity rain": "Hevige regen",
    "drizzle": "Motregen",
    "thunderstorm": "Onweer",
    "snow": "Sneeuw",
    "light snow": "Lichte sneeuw",
    "mist": "Mist",
    "haze": "Nevel",
    "fog": "Dichte mist",
}


def translate_weather(description: str) -> str:
    return WEATHER_TRANSLATIONS.get((description or "").lower(), description)
