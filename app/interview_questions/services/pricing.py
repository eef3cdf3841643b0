"""
Purpose: Token math & cost estimation.
Central pricing logic so UI/controller do not duplicate calculations.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..models import CompletionUsage


@dataclass(frozen=True)
class Price:
    input_per_1M: float
    output_per_1M: float


PRICE_TABLE = {
    "gpt-3.5-turbo-instruct": Price(1.50, 2.00),
    "davinci-002": Price(2.00, 2.00),
    "babbage-002": Price(0.40, 0.40),
}


def estimate_cost(model: str, tokens_in: int, tokens_out: int) -> float:
    p = PRICE_TABLE.get(model, Price(0.0, 0.0))
    return (tokens_in / 1000000) * p.input_per_1M + (
        tokens_out / 1000000
    ) * p.output_per_1M


def estimate_usage_cost(model: str, usage: CompletionUsage | None) -> float:
    if usage is None:
        return 0.0
    return estimate_cost(model, usage.prompt_tokens, usage.completion_tokens)


def estimate_tokens_from_text(text: str) -> int:
    """Fast heuristic: ~4 chars per token."""
    t = (text or "").strip()
    if not t:
        return 0

    return (len(t) + 3) // 4


def model_options(configured: str) -> list[str]:
    """Priced models, with the configured model first if it is not priced."""
    models = list(PRICE_TABLE.keys())
    if configured and configured not in models:
        models.insert(0, configured)
    return models
