"""
API-Based Clock Drawing Evaluation

Uses Anthropic Claude (vision) to score a clock drawing with the Shulman
criteria (0-5). Degrades to a fallback score if the API is unavailable.
"""

import base64
import binascii
import io
import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from anthropic import Anthropic
from PIL import Image

from ...config import ScoringConfig

MISSING_KEY_SCORE = 3
MISSING_KEY_REASONING = "Chave de API não configurada. Pontuação padrão."
FAILURE_REASONING = "Erro na análise automática. Atribua a pontuação manualmente."

_DATA_URL_RE = re.compile(r'^data:image/[a-zA-Z+.-]+;base64,')


CLOCK_PROMPT = """
Você é um neuropsicólogo especialista em avaliação cognitiva. Analise este desenho do Teste do Desenho do Relógio (TDR), parte da Bateria Breve de Rastreio Cognitivo (BBRC).

Instrução dada ao paciente: "Desenhe um círculo grande, como o mostrador de um relógio. Coloque todos os números. Depois, coloque os ponteiros marcando 11 horas e 10 minutos."

Avalie ESTRITAMENTE de acordo com os critérios de Shulman (escala de 0 a 5 pontos):

5 pontos – Desenho do relógio PERFEITO: círculo bem formado, todos os 12 números presentes na posição correta e bem distribuídos, dois ponteiros distintos apontando corretamente para 11:10 (ponteiro curto no 11, ponteiro longo no 2).

4 pontos – Mínimo erro visuoespacial: pequenos problemas de espaçamento entre os números ou leve desalinhamento, mas o horário 11:10 é claramente representado.

3 pontos – Representação INADEQUADA do horário 11:10 (ponteiros errados ou apenas um ponteiro), sem grande alteração visuoespacial na organização dos números.

2 pontos – Erro visuoespacial MODERADO: números concentrados em um hemisfério, fora de sequência ou fora do círculo, impossibilitando a correta indicação dos ponteiros.

1 ponto – Grande DESORGANIZAÇÃO visuoespacial: números em posições aleatórias, faltando números, perseveração, ponteiros ausentes ou sem lógica.

0 pontos – Incapacidade para representar qualquer imagem que lembre um relógio (rabiscos, página em branco, tentativa não reconhecível).

Considere:
- Presença e posição dos 12 números
- Formato circular do mostrador
- Presença de dois ponteiros distinguíveis
- Correta indicação do horário 11:10
- Distribuição espacial dos elementos

Responda SOMENTE com JSON válido (sem markdown, sem explicação):

{
  "score": <int 0-5>,
  "reasoning": "<justificativa breve em português>",
  "numbers_present": "<quais números aparecem>",
  "hands_correct": <bool>,
  "spatial_organization": "<boa|moderada|ruim>"
}
"""


@dataclass
class ClockAnalysisResult:
    score: int
    reasoning: str


ImageInput = Union[str, bytes, Path]


def _load_image_bytes(image: ImageInput) -> bytes:
    """Accept a path, raw bytes, a base64 string or a data URL"""
    if isinstance(image, bytes):
        return image
    if isinstance(image, Path):
        return image.read_bytes()

    if _DATA_URL_RE.match(image):
        return base64.b64decode(_DATA_URL_RE.sub('', image))
    if os.path.exists(image):
        with open(image, 'rb') as f:
            return f.read()
    try:
        return base64.b64decode(image, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Clock image is neither a file path nor base64 data")


def prepare_clock_image(image: ImageInput, max_side: int = 1568) -> Tuple[str, str]:
    """
    Normalize a drawing for upload.

    Canvas exports are usually RGBA on a transparent background; they are
    flattened onto white so strokes stay visible.

    Returns:
        Tuple of (base64_data, media_type)
    """
    img = Image.open(io.BytesIO(_load_image_bytes(image)))

    if img.mode in ('RGBA', 'LA') or (img.mode == 'P' and 'transparency' in img.info):
        img = img.convert('RGBA')
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        img = background
    elif img.mode != 'RGB':
        img = img.convert('RGB')

    if max(img.size) > max_side:
        img.thumbnail((max_side, max_side))

    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    buffer.seek(0)
    return base64.standard_b64encode(buffer.read()).decode('utf-8'), 'image/png'


def _parse_response(response_text: str) -> dict:
    response_text = response_text.strip()

    # Handle potential markdown wrapping
    if response_text.startswith('```'):
        response_text = response_text.split('```')[1]
        if response_text.startswith('json'):
            response_text = response_text[4:]

    try:
        return json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse API response as JSON: {e}\nResponse: {response_text[:500]}")


def analyze_clock_drawing(
    image: ImageInput,
    api_key: Optional[str] = None,
    config: Optional[ScoringConfig] = None
) -> ClockAnalysisResult:
    """
    Score a clock drawing with Claude.

    Args:
        image: Path, PNG/JPEG bytes, base64 string or data URL
        api_key: Anthropic API key (or use ANTHROPIC_API_KEY env var)
        config: ScoringConfig (model, max tokens, image size)

    Returns:
        ClockAnalysisResult with score clamped to 0-5. Without a key the
        neutral score 3 is returned; on any failure the score is 0 and the
        reasoning asks for manual scoring.
    """
    config = config or ScoringConfig()

    key = api_key or os.environ.get('ANTHROPIC_API_KEY')
    if not key:
        print("  ⚠ ANTHROPIC_API_KEY not set - returning default clock score")
        return ClockAnalysisResult(score=MISSING_KEY_SCORE, reasoning=MISSING_KEY_REASONING)

    try:
        image_data, media_type = prepare_clock_image(image, config.clock_max_image_side)

        client = Anthropic(api_key=key)
        response = client.messages.create(
            model=config.clock_model,
            max_tokens=config.clock_max_tokens,
            temperature=0,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": image_data,
                            },
                        },
                        {
                            "type": "text",
                            "text": CLOCK_PROMPT,
                        },
                    ],
                }
            ],
        )

        result = _parse_response(response.content[0].text)
        score = max(0, min(5, int(result.get('score') or 0)))
        return ClockAnalysisResult(score=score, reasoning=result.get('reasoning') or '')

    except Exception as e:
        print(f"  ⚠ Clock analysis failed: {e}")
        return ClockAnalysisResult(score=0, reasoning=FAILURE_REASONING)
