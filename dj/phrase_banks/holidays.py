#!/usr/bin/env python3
# dj/phrase_banks/holidays.py - Dutch holiday detection and themed DJ lines

import random
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

from util.randomizer import pick


@dataclass(frozen=True)
class Holiday:
    name: str
    dj_lines: List[str]


FIXED_HOLIDAYS: Dict[Tuple[int, int], Holiday] = {
    (1, 1): Holiday("Nieuwjaarsdag", [
        "Gelukkig Nieuwjaar! Wat een geweldig begin van het jaar!",
        "Nieuwjaarsdag! Tijd voor goede voornemens en goede muziek!",
        "Het nieuwe jaar is begonnen, en wij beginnen met een knaller!",
    ]),
    (2, 14): Holiday("Valentijnsdag", [
        "Happy Valentijnsdag! Speciaal voor jou en je lief!",
        "Valentijn! Een dag vol liefde en romantische muziek!",
    ]),
    (4, 26): Holiday("Koningsnacht", [
        "Koningsnacht! De nacht voor het grote feest!",
        "Vanavond gaat het los! Koningsnacht, baby!",
    ]),
    (4, 27): Holiday("Koningsdag", [
        "Lang leve de Koning! Gelukkige Koningsdag!",
        "Koningsdag! Alles oranje, alles feest!",
        "Het is Koningsdag! Tijd voor oranje, bier en de beste muziek!",
    ]),
    (5, 4): Holiday("Dodenherdenking", [
        "Vandaag herdenken we de gevallenen. Even stil en dankbaar.",
        "4 mei, een moment van bezinning.",
    ]),
    (5, 5): Holiday("Bevrijdingsdag", [
        "Gelukkige Bevrijdingsdag! Vrijheid is niet vanzelfsprekend.",
        "5 mei, een dag van vrijheid en feest!",
    ]),
    (12, 5): Holiday("Sinterklaas", [
        "Sint is in het land! Heb je je schoen al gezet?",
        "Pakjesavond! Wie heeft er een liedje?",
    ]),
    (12, 25): Holiday("Kerst", [
        "Vrolijk Kerstfeest! Geniet van de feestdagen!",
        "Kerst! De mooiste tijd van het jaar, met de mooiste muziek!",
    ]),
    (12, 26): Holiday("Kerst", [
        "Tweede Kerstdag, gezelligheid troef. Fijne feestdagen!",
        "Kerst! De mooiste tijd van het jaar, met de mooiste muziek!",
    ]),
    (12, 31): Holiday("Oudejaarsavond", [
        "Oudejaarsavond! Nog even en dan is het nieuw jaar!",
        "We sluiten het jaar af met de allerbeste muziek!",
    ]),
}

EASTER = Holiday("Pasen", [
    "Vrolijk Pasen! Geniet van het paasontbijt!",
    "Eerste Paasdag! De lentekriebels zijn begonnen!",
])


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian / Meeus algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def get_holiday(today: Optional[date] = None) -> Optional[Holiday]:
    today = today or date.today()
    holiday = FIXED_HOLIDAYS.get((today.month, today.day))
    if holiday:
        return holiday
    if today == easter_sunday(today.year):
        return EASTER
    return None


def get_holiday_line(today: Optional[date] = None, rng: Optional[random.Random] = None) -> Optional[str]:
    holiday = get_holiday(today)
    if not holiday:
        return None
    return pick(holiday.dj_lines, rng)
