"""
Tests for the clock drawing evaluator

The Anthropic client is mocked; no network calls are made.
"""

import base64
import io
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from bbrc.config import ScoringConfig
from bbrc.evaluators.screening.api_evaluator import (
    FAILURE_REASONING,
    MISSING_KEY_SCORE,
    analyze_clock_drawing,
    prepare_clock_image
)


def _png_bytes(size=(64, 64), mode='RGB', color=(0, 0, 0)):
    img = Image.new(mode, size, color)
    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def clock_png(tmp_path):
    path = tmp_path / "clock.png"
    path.write_bytes(_png_bytes())
    return str(path)


def _mock_client(text):
    client = MagicMock()
    client.messages.create.return_value.content = [MagicMock(text=text)]
    return client


class TestPrepareClockImage:
    """Test image normalization"""

    def test_flattens_transparency_and_resizes(self):
        raw = _png_bytes(size=(3000, 1500), mode='RGBA', color=(0, 0, 0, 0))
        data, media_type = prepare_clock_image(raw, max_side=1000)

        assert media_type == 'image/png'
        img = Image.open(io.BytesIO(base64.b64decode(data)))
        assert img.mode == 'RGB'
        assert max(img.size) == 1000
        assert img.getpixel((0, 0)) == (255, 255, 255)

    def test_small_image_keeps_size(self):
        data, _ = prepare_clock_image(_png_bytes(size=(40, 30)))
        img = Image.open(io.BytesIO(base64.b64decode(data)))
        assert img.size == (40, 30)

    def test_accepts_data_url(self):
        encoded = base64.b64encode(_png_bytes()).decode('ascii')
        data, _ = prepare_clock_image(f"data:image/png;base64,{encoded}")
        assert data

    def test_accepts_path(self, clock_png):
        data, _ = prepare_clock_image(clock_png)
        assert data

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            prepare_clock_image("not an image!!")


class TestAnalyzeClockDrawing:
    """Test scoring through the mocked API"""

    def test_missing_key_returns_default(self, monkeypatch, clock_png):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        result = analyze_clock_drawing(clock_png)
        assert result.score == MISSING_KEY_SCORE

    def test_parses_fenced_json_and_clamps(self, clock_png):
        client = _mock_client('```json\n{"score": 7, "reasoning": "ok"}\n```')
        with patch("bbrc.evaluators.screening.api_evaluator.Anthropic", return_value=client):
            result = analyze_clock_drawing(clock_png, api_key="test-key")

        assert result.score == 5
        assert result.reasoning == "ok"

    def test_request_uses_config(self, clock_png):
        client = _mock_client('{"score": 4, "reasoning": "Mínimo erro visuoespacial"}')
        config = ScoringConfig(clock_model="test-model", clock_max_tokens=256)
        with patch("bbrc.evaluators.screening.api_evaluator.Anthropic", return_value=client):
            result = analyze_clock_drawing(clock_png, api_key="test-key", config=config)

        assert result.score == 4
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == 256
        content = kwargs["messages"][0]["content"]
        assert content[0]["type"] == "image"
        assert content[0]["source"]["media_type"] == "image/png"

    def test_api_failure_scores_zero(self, clock_png):
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("overloaded")
        with patch("bbrc.evaluators.screening.api_evaluator.Anthropic", return_value=client):
            result = analyze_clock_drawing(clock_png, api_key="test-key")

        assert result.score == 0
        assert result.reasoning == FAILURE_REASONING

    def test_unparseable_response_scores_zero(self, clock_png):
        client = _mock_client("O relógio parece bom")
        with patch("bbrc.evaluators.screening.api_evaluator.Anthropic", return_value=client):
            result = analyze_clock_drawing(clock_png, api_key="test-key")

        assert result.score == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
