"""Token and cost estimates shown in the sidebar."""

import pytest

from core.services.pricing import estimate_cost, estimate_tokens_from_text, price_for


def test_estimate_cost_known_model():
    cost = estimate_cost("gemini-2.5-flash", 1_000_000, 1_000_000)
    assert cost == pytest.approx(2.80)


def test_estimate_cost_accepts_models_prefix():
    assert estimate_cost("models/gemini-2.5-pro", 1_000_000, 0) == pytest.approx(1.25)


def test_unknown_model_is_free():
    assert estimate_cost("unknown", 1000, 1000) == 0.0


def test_estimate_tokens_from_text():
    assert estimate_tokens_from_text("") == 0
    assert estimate_tokens_from_text("abcd") == 1
    assert estimate_tokens_from_text("abcde") == 2


def test_price_for_strips_models_prefix():
    assert price_for("models/gemini-2.5-flash") == price_for("gemini-2.5-flash")
    assert price_for("").input_per_1M == 0.0
