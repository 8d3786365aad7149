# Tone-specific phrase pools. "{station}" is the only slot used here.
from typing import Dict, List

from cnst.dj_tone import DJTone

FILLER = "filler"
TRANSITION = "transition"
STATION_ID = "station_id"
FUN_FACT = "fun_fact"

TONE_PHRASES: Dict[DJTone, Dict[str, List[str]]] = {
    DJTone.ENERGETIC: {
        FILLER: [
            "Wow, wat een nummer!", "Bam! Daar ging ie!", "Jaaa, lekker hoor!",
            "Wauw!", "Top nummer dit!", "Vol gas!", "Daar word je blij van!",
            "We gaan lekker door!", "Banger!", "Dit is waar het om draait!",
        ],
        TRANSITION: [
            "En we gaan volle kracht verder met", "Het volgende nummer, gaan!",
            "Hier komt ie!", "Nog een dikke plaat, van",
            "Non-stop hits, hier is", "Party time met",
            "We draaien door met", "Speciaal voor jullie,",
        ],
        STATION_ID: [
            "Je luistert naar {station}, non-stop de beste hits!",
            "{station}! De muziek die je energie geeft!",
            "Dit is {station}, wij stoppen nooit!",
            "{station}, nummer 1 voor de beste beats!",
        ],
        FUN_FACT: [
            "Even een leuk feitje tussendoor!", "Check dit even!",
            "Weetje van de dag!", "Interessant feitje!",
        ],
    },
    DJTone.CHILL: {
        FILLER: [
            "Mooi... echt mooi.", "Heerlijk om naar te luisteren.",
            "Geniet ervan...", "Rustig aan, genieten...",
            "Wat een fijn nummer...", "Mm, dit is goed...",
            "Ontspannen...", "Lekker rustig...",
        ],
        TRANSITION: [
            "En we gaan rustig verder met", "Het volgende nummer is van",
            "Luister nu naar", "Even lekker doorluisteren met",
            "Nog meer moois, van", "Rustig aan, hier is",
        ],
        STATION_ID: [
            "Je luistert naar {station}... ontspannen en genieten.",
            "{station}. Muziek voor de ziel.",
            "Dit is {station}, rustig aan en genieten.",
            "{station}... relax en luister.",
        ],
        FUN_FACT: [
            "Even een rustig momentje voor een leuk feitje.", "Wist je dit al?",
            "Zomaar een feitje...", "Interessant...",
        ],
    },
    DJTone.WARM: {
        FILLER: [
            "Prachtig toch?", "Genieten!", "Fantastisch nummer!",
            "Altijd mooi om te horen!", "Geweldig!", "Ik krijg er kippenvel van!",
            "Daar word je toch blij van?", "Wat een mooi nummer was dat!",
        ],
        TRANSITION: [
            "En we gaan verder met", "Het volgende nummer is van",
            "Nu voor jullie", "En dan nu",
            "Speciaal voor jullie luisteraars", "We draaien nu",
            "Dit wordt ook weer een topper, hier is",
        ],
        STATION_ID: [
            "Je luistert naar {station}, de muziek die bij jou past!",
            "{station}, jouw favoriete radiozender!",
            "Welkom bij {station}, wij draaien door!",
            "{station}, altijd de lekkerste muziek!",
        ],
        FUN_FACT: [
            "Wist je dit al? Even een leuk feitje!", "Even een weetje tussendoor!",
            "Hier heb je een leuk feitje!", "Aandacht, een leuk weetje!",
        ],
    },
    DJTone.SMOOTH: {
        FILLER: [
            "Heerlijk...", "Wat smooth...", "Geniet ervan...",
            "Prachtig nummer...", "Klasse...", "Dat was schitterend...",
            "Wat een kwaliteit...", "Tijdloos mooi...",
        ],
        TRANSITION: [
            "En nu, voor jullie", "Het volgende nummer,",
            "Luister naar dit prachtige nummer van", "Nog meer moois,",
            "We gaan door met", "Hier is", "Even genieten van",
        ],
        STATION_ID: [
            "Je luistert naar {station}. Kwaliteit in muziek.",
            "{station}... voor de fijnproevers.",
            "Dit is {station}, muziek met klasse.",
            "{station}. Alleen het beste.",
        ],
        FUN_FACT: [
            "Even een mooi feitje.", "Wist je dit?",
            "Een stukje kennis tussendoor.", "Bijzonder feitje...",
        ],
    },
    DJTone.EDGY: {
        FILLER: [
            "Vet!", "Hard!", "Dikke plaat!", "Fire!",
            "Beuken!", "Lekker rauw!", "Daar gaat ie!",
            "Rock on!", "Banger alert!",
        ],
        TRANSITION: [
            "En we pakken door met", "Nog eentje, van",
            "Check dit, van", "Hard gaan met",
            "Next up,", "Hier komt ie, van", "Volume omhoog voor",
        ],
        STATION_ID: [
            "{station}! De hardste beats!",
            "Je luistert naar {station}, recht uit de underground!",
            "Dit is {station}, harder dan hard!",
            "{station}! Wij gaan door tot het einde!",
        ],
        FUN_FACT: [
            "Even een vet feitje!", "Check dit!",
            "Random fact!", "Wist je dit?",
        ],
    },
}

# Tones that get spoken filler words sprinkled in
CHATTY_TONES = (DJTone.ENERGETIC, DJTone.WARM, DJTone.EDGY)
SPOKEN_FILLERS = ["eh", "nou", "zeg", "ja", "tja"]


def get_phrases(tone: DJTone, kind: str) -> List[str]:
    return TONE_PHRASES.get(tone, TONE_PHRASES[DJTone.WARM])[kind]
