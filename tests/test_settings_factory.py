import pytest

from interview_questions.models import CompletionSettings, INTERVIEW_DEFAULT_MODEL
from interview_questions.services.settings_factory import (
    diversity_settings,
    stable_settings,
    with_defaults,
)

from conftest import FakeRandomSource


def test_stable_settings_are_fixed():
    s = stable_settings("user-1")
    assert s == CompletionSettings(
        model=INTERVIEW_DEFAULT_MODEL,
        frequency_penalty=0.75,
        max_tokens=175,
        presence_penalty=0.7,
        temperature=1.0,
        top_p=0.85,
        user="user-1",
    )
    assert stable_settings("user-1") == s


def test_diversity_uses_top_p_for_low_draw():
    # top_p, sampling switch, frequency, max_tokens, presence
    rng = FakeRandomSource([45, 7, 60, 210, 33])

    s = diversity_settings("u", rng)

    assert s.top_p == 0.45
    assert s.temperature == 1.0
    assert s.frequency_penalty == 0.6
    assert s.max_tokens == 210
    assert s.presence_penalty == 0.33
    assert s.user == "u"
    assert s.model == INTERVIEW_DEFAULT_MODEL
    assert rng.calls == [(30, 90), (1, 10), (20, 85), (175, 275), (10, 80)]


def test_diversity_uses_temperature_for_high_draw():
    rng = FakeRandomSource([45, 8, 72, 20, 175, 10])

    s = diversity_settings("u", rng)

    assert s.temperature == 0.72
    assert s.top_p == 1.0
    assert s.frequency_penalty == 0.2
    assert s.max_tokens == 175
    assert s.presence_penalty == 0.1
    assert rng.calls[2] == (30, 90)


@pytest.mark.parametrize("attempt", range(200))
def test_diversity_never_varies_both_controls(attempt):
    s = diversity_settings("u")
    if s.temperature == 1.0:
        assert 0.3 <= s.top_p < 0.9
    else:
        assert s.top_p == 1.0
        assert 0.3 <= s.temperature < 0.9
    assert 0.2 <= s.frequency_penalty < 0.85
    assert 0.1 <= s.presence_penalty < 0.8
    assert 175 <= s.max_tokens < 275


def test_with_defaults_fills_model_on_a_copy():
    original = CompletionSettings(max_tokens=100, temperature=1.0, top_p=0.5)

    merged = with_defaults(original)

    assert merged.model == INTERVIEW_DEFAULT_MODEL
    assert original.model == ""
    assert merged.max_tokens == 100


def test_with_defaults_keeps_explicit_model():
    original = CompletionSettings(model="davinci-002")
    merged = with_defaults(original, "other")
    assert merged.model == "davinci-002"
    assert merged is not original
