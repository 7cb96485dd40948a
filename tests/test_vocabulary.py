"""
Tests for normalization, tokenization and vocabulary construction

Covers:
- Canonical form (accents, case, whitespace, idempotence)
- Tokenizer punctuation handling and order
- Target table (synonyms, plurals, collisions)
- Recognition vocabulary identity resolution
- Animal dictionary multi-word forms
- JSON battery configuration loading
"""

import json

import pytest
from bbrc.config import ScoringConfig
from bbrc.evaluators.screening import (
    AnimalDictionary,
    VocabularyConflictError,
    build_vocabulary,
    default_vocabulary,
    load_vocabulary_config,
    make_token,
    normalize,
    tokenize
)


class TestNormalize:
    """Test canonical form"""

    def test_strips_accents_and_case(self):
        assert normalize("Árvore") == "arvore"
        assert normalize("AVIÃO") == "aviao"
        assert normalize("Caminhão") == "caminhao"

    def test_trims_whitespace(self):
        assert normalize("  casa \n") == "casa"

    def test_empty(self):
        assert normalize("") == ""
        assert normalize(None) == ""

    @pytest.mark.parametrize("text", [
        "Árvore", "  Pão de Açúcar ", "İstanbul", "ÇÃÕÉ", "lobo-guará", "tigre-d'água", "ß",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestTokenize:
    """Test word splitting"""

    def test_splits_on_punctuation(self):
        words = tokenize("sapato, casa. pente; chave! avião? balde")
        assert words == ["sapato", "casa", "pente", "chave", "avião", "balde"]

    def test_collapses_runs_and_discards_empty(self):
        assert tokenize("  casa ,,  pente  ") == ["casa", "pente"]

    def test_keeps_hyphenated_names(self):
        assert tokenize("lobo-guará gato") == ["lobo-guará", "gato"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize(" ,. ") == []


class TestSpokenToken:
    """Test token records"""

    def test_tagged_copy(self):
        token = make_token("Tênis", confidence=0.7)
        tagged = token.tagged("target", "sapato")
        assert tagged.classification == "target"
        assert tagged.mapped_id == "sapato"
        assert tagged.normalized == "tenis"
        assert token.classification == "intrusion"

    def test_unknown_classification_rejected(self):
        with pytest.raises(ValueError):
            make_token("casa").tagged("hit")


class TestTargetTable:
    """Test target forms"""

    def test_primary_and_synonyms_share_canonical(self):
        vocab = default_vocabulary()
        assert vocab.target_forms["tenis"].identity == "sapato"
        assert vocab.target_forms["tenis"].canonical == "sapato"
        assert vocab.target_forms["jabuti"].identity == "tartaruga"
        assert vocab.target_forms["aviao"].identity == "avião"

    def test_plural_forms_registered(self):
        vocab = default_vocabulary()
        assert vocab.target_forms["casas"].identity == "casa"
        assert vocab.target_forms["colheres"].identity == "colher"

    def test_plural_never_overrides_explicit_form(self):
        vocab = build_vocabulary(targets=["mala", "malas"], synonyms={})
        assert vocab.target_forms["malas"].identity == "malas"

    def test_plural_does_not_trigger_reject(self):
        config = ScoringConfig(collision_policy="reject")
        vocab = build_vocabulary(targets=["mala", "malas"], synonyms={}, config=config)
        assert vocab.target_forms["mala"].identity == "mala"

    def test_collision_last_wins_by_default(self):
        vocab = build_vocabulary(
            targets=["sapato", "bota"],
            synonyms={"sapato": ["calçado"], "bota": ["calçado"]}
        )
        assert vocab.target_forms["calcado"].identity == "bota"

    def test_collision_rejected_when_configured(self):
        config = ScoringConfig(collision_policy="reject")
        with pytest.raises(VocabularyConflictError) as exc:
            build_vocabulary(
                targets=["sapato", "bota"],
                synonyms={"sapato": ["calçado"], "bota": ["calçado"]},
                config=config
            )
        assert exc.value.form == "calcado"
        assert exc.value.existing == "sapato"
        assert exc.value.incoming == "bota"

    def test_builtin_battery_has_no_collisions(self):
        config = ScoringConfig(collision_policy="reject")
        vocab = build_vocabulary(config=config)
        assert len(vocab.targets) == 10

    def test_seen_key_resolves_synonyms(self):
        vocab = default_vocabulary()
        assert vocab.seen_key("tênis") == "sapato"
        assert vocab.seen_key("Avião") == "aviao"
        assert vocab.seen_key("caminhão") == "caminhao"

    def test_tables_are_read_only(self):
        vocab = default_vocabulary()
        with pytest.raises(TypeError):
            vocab.target_forms["bola"] = vocab.target_forms["casa"]


class TestRecognitionVocabulary:
    """Test recognition sheet lookup"""

    def test_sheet_target_resolves_to_target_identity(self):
        vocab = default_vocabulary()
        entry = vocab.recognition["arvore"]
        assert entry.is_target
        assert entry.identity == "árvore"
        assert entry.canonical == "arvore"

    def test_shown_foil_with_synonym(self):
        vocab = default_vocabulary()
        assert vocab.recognition["gatinho"].identity == "gato"
        assert not vocab.recognition["gatinho"].is_target

    def test_accepts_camel_case_flag(self):
        vocab = build_vocabulary(recognition_items=[{"id": "lápis", "isTarget": False}])
        assert vocab.recognition["lapis"].is_target is False


class TestAnimalDictionary:
    """Test animal names"""

    def test_hyphenated_and_spoken_forms(self):
        animals = AnimalDictionary.from_names(["lobo-guará"])
        assert animals.lookup("lobo-guará") == "lobo guara"
        assert animals.lookup("Lobo Guará") == "lobo guara"
        assert "lobo guara" in animals

    def test_max_words(self):
        animals = AnimalDictionary.from_names(["gato", "urso polar", "mico-leão-dourado"])
        assert animals.max_words == 3
        assert len(animals) == 3

    def test_default_list_contains_multi_word_names(self):
        animals = default_vocabulary().animals
        assert "urso polar" in animals
        assert "mico leão dourado" in animals
        assert "pedra" not in animals


class TestConfig:
    """Test configuration validation"""

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            ScoringConfig(collision_policy="first_wins")

    def test_invalid_max_ngram(self):
        with pytest.raises(ValueError):
            ScoringConfig(max_ngram=0)

    def test_window_follows_dictionary_by_default(self):
        assert ScoringConfig().max_ngram is None
        assert default_vocabulary().animals.max_words >= 4

    def test_default_vocabulary_is_memoized(self):
        assert default_vocabulary() is default_vocabulary()


class TestLoadVocabularyConfig:
    """Test JSON battery configuration"""

    def test_load_partial_config(self, tmp_path):
        path = tmp_path / "battery.json"
        path.write_text(json.dumps({
            "targets": ["bola", "copo"],
            "synonyms": {"bola": ["pelota"]},
            "distractors": ["prato"],
        }), encoding="utf-8")

        vocab = load_vocabulary_config(str(path))
        assert vocab.targets == ("bola", "copo")
        assert vocab.target_forms["pelota"].identity == "bola"
        assert vocab.distractor_forms == frozenset({"prato"})
        # Missing keys fall back to the built-in battery
        assert "cachorro" in vocab.animals


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
