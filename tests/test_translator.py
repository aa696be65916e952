"""Tests for the translation resolver cascade"""

import pytest

from cultura.bhashini import BhashiniClient
from cultura.cache import TranslationCache
from cultura.dictionaries import CURATED_PHRASES
from cultura.errors import (
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    RateLimitError,
    ServiceError,
)
from cultura.languages import SUPPORTED_LANGUAGES
from cultura.offline_translation import OfflineTranslator
from cultura.translator import TranslationResolver, first_success
from conftest import FakeResponse, FakeSession


class StubRemote:
    """Remote client double: returns a fixed translation or raises"""

    def __init__(self, result="REMOTE", error=None):
        self.result = result
        self.error = error
        self.calls = []

    def translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.error is not None:
            raise self.error
        return self.result

    def check_health(self):
        return {"available": True, "status": "healthy"}


class StubOffline:
    """Offline double whose cascade never helps but whose heuristic does"""

    def __init__(self, heuristic_result=None):
        self.heuristic_result = heuristic_result

    def translate(self, text, source_lang, target_lang):
        return text

    def heuristic(self, text, target_lang):
        return self.heuristic_result


@pytest.fixture
def remote():
    return StubRemote()


@pytest.fixture
def translator(offline, remote, clock):
    return TranslationResolver(cache=TranslationCache(clock=clock), offline=offline, remote=remote)


class TestPreconditions:

    def test_identity_for_every_language(self, translator, remote):
        for code in SUPPORTED_LANGUAGES:
            result = translator.resolve("Bihu Festival", code, code)
            assert result.text == "Bihu Festival"
            assert result.method == "identity"
        assert remote.calls == []
        assert len(translator.cache) == 0

    def test_empty_text(self, translator, remote):
        assert translator.translate("", "en", "as") == ""
        assert remote.calls == []

    @pytest.mark.parametrize("source, target", [("en", "fr"), ("xx", "as"), ("EN", "as")])
    def test_unsupported_language_raises(self, translator, source, target):
        with pytest.raises(ConfigurationError):
            translator.translate("hello", source, target)

    def test_non_string_text_raises(self, translator):
        with pytest.raises(ConfigurationError):
            translator.translate(["hello"], "en", "as")


class TestCuratedPhrases:

    @pytest.mark.parametrize("key", sorted(CURATED_PHRASES))
    @pytest.mark.parametrize("lang", ["as", "mni", "bn", "hi"])
    def test_curated_value_wins_even_when_remote_is_down(self, offline, key, lang):
        remote = StubRemote(error=NetworkError())
        translator = TranslationResolver(offline=offline, remote=remote)
        result = translator.resolve(CURATED_PHRASES[key]["en"], "en", lang)
        assert result.text == CURATED_PHRASES[key][lang]
        assert result.method == "curated"
        assert remote.calls == []

    def test_festival_without_credentials(self):
        session = FakeSession()
        remote = BhashiniClient(user_id="", api_key="", session=session)
        translator = TranslationResolver(offline=OfflineTranslator(use_public_lookup=False), remote=remote)
        assert translator.translate("Festival", "en", "as") == "উৎসৱ"
        assert session.calls == []


class TestCascade:

    def test_offline_before_remote(self, translator, remote):
        result = translator.resolve("Good morning", "en", "as")
        assert result.method == "offline"
        assert result.confidence == 0.8
        assert remote.calls == []

    def test_remote_used_when_offline_fails(self, translator, remote):
        result = translator.resolve("Zzqx flurb", "en", "as")
        assert (result.text, result.method) == ("REMOTE", "remote")
        assert remote.calls == [("Zzqx flurb", "en", "as")]

    @pytest.mark.parametrize("error", [
        NetworkError(), AuthenticationError(), RateLimitError(), ServiceError("boom"),
    ])
    def test_remote_errors_advance_to_heuristic(self, clock, error):
        translator = TranslationResolver(
            cache=TranslationCache(clock=clock),
            offline=StubOffline(heuristic_result="HEURISTIC"),
            remote=StubRemote(error=error),
        )
        result = translator.resolve("Zzqx flurb", "en", "as")
        assert result.text == "HEURISTIC"
        assert result.method == "heuristic"
        assert result.confidence < 0.5

    def test_total_failure_returns_input_without_caching(self, clock):
        translator = TranslationResolver(
            cache=TranslationCache(clock=clock),
            offline=StubOffline(),
            remote=StubRemote(error=NetworkError()),
        )
        result = translator.resolve("Zzqx flurb", "en", "as")
        assert result.text == "Zzqx flurb"
        assert result.method == "fallback"
        assert result.confidence == 0.0
        assert len(translator.cache) == 0

    def test_remote_returning_input_is_not_usable(self, clock):
        translator = TranslationResolver(
            cache=TranslationCache(clock=clock),
            offline=StubOffline(),
            remote=StubRemote(result="Zzqx flurb"),
        )
        assert translator.resolve("Zzqx flurb", "en", "as").method == "fallback"

    def test_remote_disabled(self, offline):
        translator = TranslationResolver(offline=offline, use_remote=False)
        assert translator.translate("Zzqx flurb", "en", "as") == "Zzqx flurb"
        assert translator.check_service_health()["status"] == "disabled"

    @pytest.mark.parametrize("payload", [[], "oops", {"pipelineResponseConfig": [{}], "pipelineInferenceAPIEndPoint": 1}])
    def test_malformed_remote_payload_falls_back(self, offline, payload):
        remote = BhashiniClient(user_id="u", api_key="k", session=FakeSession([FakeResponse(200, payload)]),
                                sleep=lambda _: None)
        translator = TranslationResolver(offline=offline, remote=remote)
        result = translator.resolve("zzqx unknownword", "en", "hi")
        assert result.text == "zzqx unknownword"
        assert result.method == "fallback"


class TestCaching:

    def test_second_call_is_a_cache_hit(self, translator, remote):
        first = translator.resolve("Zzqx flurb", "en", "as")
        second = translator.resolve("Zzqx flurb", "en", "as")
        assert first.text == second.text == "REMOTE"
        assert second.method == "cache"
        assert len(remote.calls) == 1

    def test_curated_result_is_cached(self, translator):
        translator.translate("Festival", "en", "as")
        assert translator.resolve("Festival", "en", "as").method == "cache"

    def test_expired_entry_goes_back_through_the_cascade(self, translator, remote, clock):
        translator.translate("Zzqx flurb", "en", "as")
        clock.advance(3600)
        assert translator.resolve("Zzqx flurb", "en", "as").method == "remote"
        assert len(remote.calls) == 2

    def test_clear_cache(self, translator, remote):
        translator.translate("Zzqx flurb", "en", "as")
        translator.clear_cache()
        translator.translate("Zzqx flurb", "en", "as")
        assert len(remote.calls) == 2


class TestHelpers:

    def test_batch(self, translator):
        results = translator.translate_batch(["Festival", 7], "en", "as")
        assert results[0] == {"original": "Festival", "translated": "উৎসৱ", "success": True}
        assert results[1]["success"] is False
        assert results[1]["translated"] == 7

    def test_stats(self, translator):
        translator.translate("Festival", "en", "as")
        stats = translator.get_stats()
        assert stats["cache"]["size"] == 1
        assert stats["supported_languages"] == 5
        assert stats["curated_translations"] == len(CURATED_PHRASES)

    def test_health_delegates_to_remote(self, translator):
        assert translator.check_service_health()["available"] is True

    def test_first_success_skips_none_and_identity(self):
        strategies = [
            ("none", lambda t, s, g: None),
            ("same", lambda t, s, g: t),
            ("good", lambda t, s, g: t.upper()),
            ("never", lambda t, s, g: pytest.fail("should not run")),
        ]
        assert first_success(strategies, "abc", "en", "as") == ("good", "ABC")
        assert first_success(strategies[:2], "abc", "en", "as") is None
