from typing import Dict, List

GENRE_FUN_FACTS: Dict[str, List[str]] = {
    "default": [
        "Wist je dat Nederland meer fietsen heeft dan inwoners? Zo'n 23 miljoen fietsen!",
        "Wist je dat de eerste radio-uitzending in Nederland plaatsvond in 1919?",
        "Wist je dat muziek luisteren stress tot 65 procent kan verminderen?",
        "Wist je dat het luisteren naar muziek dezelfde stofjes aanmaakt als chocolade eten?",
        "Wist je dat Amsterdam meer bruggen heeft dan Venetie?",
        "Wist je dat stroopwafels oorspronkelijk uit Gouda komen?",
        "Wist je dat Nederland de grootste bloemexporteur ter wereld is?",
        "Wist je dat het woord gezellig niet te vertalen is naar het Engels?",
    ],
    "jazz": [
        "Wist je dat Miles Davis het album Kind of Blue in slechts twee sessies opnam?",
        "Wist je dat het woord jazz waarschijnlijk uit New Orleans komt?",
        "Wist je dat John Coltrane soms 12 uur per dag oefende op zijn saxofoon?",
        "Wist je dat de eerste jazzopname werd gemaakt in 1917?",
    ],
    "rock": [
        "Wist je dat de eerste elektrische gitaar werd uitgevonden in 1931?",
        "Wist je dat Golden Earring met Radar Love een van de langste hits ooit had?",
        "Wist je dat Led Zeppelin nooit singles uitbracht in het Verenigd Koninkrijk?",
        "Wist je dat Jimi Hendrix zichzelf gitaar leerde spelen?",
    ],
    "hiphop": [
        "Wist je dat hip-hop in 1973 begon op een feestje in de Bronx?",
        "Wist je dat Rapper's Delight van The Sugarhill Gang de eerste grote hip-hop hit was?",
        "Wist je dat DJ Kool Herc wordt beschouwd als de vader van hip-hop?",
        "Wist je dat beatboxing al sinds de jaren 80 bestaat?",
    ],
    "dutch": [
        "Wist je dat Andre Hazes de bestverkochte Nederlandse artiest aller tijden is?",
        "Wist je dat het Eurovisie Songfestival voor het eerst in Nederland werd gehouden in 1958?",
        "Wist je dat Marco Borsato meer dan 5 miljoen albums heeft verkocht?",
        "Wist je dat het Concertgebouw in Amsterdam een van de beste akoestieken ter wereld heeft?",
    ],
    "dance": [
        "Wist je dat Nederland het land is van de grootste DJ's ter wereld?",
        "Wist je dat Tiesto de eerste DJ was die op de Olympische Spelen draaide?",
        "Wist je dat Amsterdam Dance Event het grootste dancefeest ter wereld is?",
        "Wist je dat Martin Garrix slechts 17 was toen Animals een wereldhit werd?",
    ],
}


def get_genre_facts(station_id: str) -> List[str]:
    return GENRE_FUN_FACTS.get(station_id) or GENRE_FUN_FACTS["default"]
