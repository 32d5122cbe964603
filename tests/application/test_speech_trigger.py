import pytest

from italy_phrases.application.speech_trigger import SpeechTrigger


class _RecordingSpeech:
    def __init__(self):
        self.calls = []

    def speak(self, text, locale, rate):
        self.calls.append((text, locale, rate))


@pytest.mark.parametrize("text", ["Sinistra", "", "Limite di velocità"])
def test_speak_issues_one_request_with_fixed_locale_and_rate(text):
    speech = _RecordingSpeech()
    trigger = SpeechTrigger(speech)

    result = trigger.speak(text)

    assert result is None
    assert speech.calls == [(text, "it-IT", 0.45)]


def test_speak_uses_configured_rate_for_every_call():
    speech = _RecordingSpeech()
    trigger = SpeechTrigger(speech, rate=0.6)

    trigger.speak("Vai")
    trigger.speak("Vai")

    assert speech.calls == [("Vai", "it-IT", 0.6), ("Vai", "it-IT", 0.6)]
