"""
Purpose: Ready-made completion settings profiles.

Completion settings, briefly:
- frequency_penalty lowers the chance of a word being picked again the more
  it has already been used.
- presence_penalty only cares whether a word has appeared at all; keeps the
  list from sounding repetitive.
- max_tokens bounds output: ~75 gives about 5 questions in ~3s, 128 about
  12 questions, 512 about 50 but takes 20s+.
- temperature: lower is more deterministic and repetitive.
- top_p: nucleus sampling; 0.5 considers half of the likelihood-weighted options.

Tune temperature OR top_p and leave the other at 1. Top-p suits accurate,
correct output; temperature suits more original output.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional

from ..interfaces import RandomSource
from ..models import CompletionSettings, INTERVIEW_DEFAULT_MODEL
from ..utils.random_source import random_float, random_int

NEUTRAL = 1.0

# Sampling control draw: values above the threshold switch to temperature.
SAMPLING_DRAW_RANGE = (1, 10)
TEMPERATURE_THRESHOLD = 7
SAMPLING_BAND = (0.3, 0.9)


def stable_settings(user: str) -> CompletionSettings:
    """Fixed settings tuned for good, reproducible question lists."""
    return CompletionSettings(
        model=INTERVIEW_DEFAULT_MODEL,
        frequency_penalty=0.75,
        max_tokens=175,
        presence_penalty=0.7,
        temperature=NEUTRAL,
        top_p=0.85,
        user=user,
    )


def diversity_settings(
    user: str, rng: Optional[RandomSource] = None
) -> CompletionSettings:
    """Randomized settings to encourage new results for repeated input."""
    # Use top_p most of the time but temperature sometimes
    temperature = NEUTRAL
    top_p = random_float(*SAMPLING_BAND, rng=rng)

    if random_int(*SAMPLING_DRAW_RANGE, rng=rng) > TEMPERATURE_THRESHOLD:
        temperature = random_float(*SAMPLING_BAND, rng=rng)
        top_p = NEUTRAL

    return CompletionSettings(
        model=INTERVIEW_DEFAULT_MODEL,
        frequency_penalty=random_float(0.2, 0.85, rng=rng),
        max_tokens=random_int(175, 275, rng=rng),
        presence_penalty=random_float(0.1, 0.8, rng=rng),
        temperature=temperature,
        top_p=top_p,
        user=user,
    )


def with_defaults(
    settings: CompletionSettings, model: str = INTERVIEW_DEFAULT_MODEL
) -> CompletionSettings:
    """Copy of settings with a missing model filled in; the input is untouched."""
    if settings.model:
        return replace(settings)
    return replace(settings, model=model)
