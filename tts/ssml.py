import re
from xml.sax.saxutils import escape

SSML_MARKERS = ("<break", "<emphasis", "<prosody")

ELLIPSIS_BREAK = '<break time="500ms"/>'
SENTENCE_BREAK = '<break time="350ms"/>'
COMMA_BREAK = '<break time="150ms"/>'
COLON_BREAK = '<break time="200ms"/>'

_ELLIPSIS = re.compile(r"(\.\.\.|…)")
_SENTENCE_END = re.compile(r"(?<!\.)([.!?])(?=\s|$)")
_COMMA = re.compile(r",(?=\s|$)")
_COLON = re.compile(r":(?=\s|$)")
_ELLIPSIS_TOKEN = "\x00ELLIPSIS\x00"


def has_ssml_markup(text: str) -> bool:
    return any(marker in text for marker in SSML_MARKERS)


def add_pauses(text: str) -> str:
    """Escape text and add break tags after punctuation."""
    escaped = escape(text.strip())
    escaped = _ELLIPSIS.sub(_ELLIPSIS_TOKEN, escaped)
    escaped = _SENTENCE_END.sub(lambda m: f"{m.group(1)}{SENTENCE_BREAK}", escaped)
    escaped = _COMMA.sub(f",{COMMA_BREAK}", escaped)
    escaped = _COLON.sub(f":{COLON_BREAK}", escaped)
    return escaped.replace(_ELLIPSIS_TOKEN, f"...{ELLIPSIS_BREAK}")


def to_ssml(text: str, voice: str = None, rate: str = None, pitch: str = None) -> str:
    """
    Wrap plain text in a <speak> envelope. Text that already carries SSML
    markup is returned unchanged.
    """
    if has_ssml_markup(text):
        return text

    body = add_pauses(text)

    prosody_attrs = []
    if rate and rate != "default":
        prosody_attrs.append(f'rate="{escape(rate)}"')
    if pitch and pitch != "default":
        prosody_attrs.append(f'pitch="{escape(pitch)}"')
    if prosody_attrs:
        body = f"<prosody {' '.join(prosody_attrs)}>{body}</prosody>"

    if voice:
        body = f'<voice name="{escape(voice)}">{body}</voice>'

    return f"<speak>{body}</speak>"
