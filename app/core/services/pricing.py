"""
Purpose: Usage insight for the sidebar. Gemini list prices (USD per 1M
tokens) and a rough token estimate for text that has no usage report.
"""

from ..models import Price

PRICE_TABLE = {
    "gemini-2.5-flash": Price(0.30, 2.50),
    "gemini-2.5-flash-lite": Price(0.10, 0.40),
    "gemini-2.5-pro": Price(1.25, 10.00),
    "gemini-2.0-flash": Price(0.10, 0.40),
}
FREE = Price(0.0, 0.0)


def price_for(model: str) -> Price:
    """Look up a model, accepting the `models/` prefix the API reports."""
    return PRICE_TABLE.get((model or "").removeprefix("models/"), FREE)


def estimate_cost(model: str, tokens_in: int, tokens_out: int) -> float:
    p = price_for(model)
    return (tokens_in * p.input_per_1M + tokens_out * p.output_per_1M) / 1_000_000


def estimate_tokens_from_text(text: str) -> int:
    # ~4 characters per token, rounded up
    t = (text or "").strip()
    return (len(t) + 3) // 4 if t else 0
