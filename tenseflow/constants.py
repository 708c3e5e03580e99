"""Shared constants for the TenseFlow core."""

PERSONS = {"first", "second", "third"}
NUMBERS = {"singular", "plural"}
POLARITIES = {"positive", "negative"}
QUESTION_TYPES = {"WH", "interrogative", "none"}

ASPECTS = {"simple", "continuous", "perfect", "perfect continuous"}
VOICES = {"active", "passive"}
TIME_REFERENCES = {"now-relative", "past-relative", "future-relative", "ongoing"}

TENSE_NAMES = (
    "Present Simple",
    "Present Continuous",
    "Present Perfect",
    "Present Perfect Continuous",
    "Past Simple",
    "Past Continuous",
    "Past Perfect",
    "Future Simple",
    "Future Continuous",
    "Future Perfect",
)

EXTRA_ATTRIBUTE_FIELDS = ("aspect", "voice", "timeReference")

TEMPLATE_SET_V1 = "v1"
TEMPLATE_SET_V2 = "v2"

REFERENCE_BASIC = "basic"
REFERENCE_EXTENDED = "extended"
