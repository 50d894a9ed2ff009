"""
Tests for text metrics and the shared text/number helpers

Covers:
- Word counting and words-per-minute
- Pace rating boundaries
- Whole-word filler detection
- Half-up rounding and phrase matching
"""

import pytest
from interview_grader.evaluators import analyze_text, rate_pace, count_filler_words, calculate_wpm
from interview_grader.evaluators.text_metrics import count_words, get_text_suggestions
from interview_grader.utils import round_half_up, count_phrase, contains_phrase, normalize, stem


class TestWordCount:
    """Test word counting and wpm"""

    def test_counts_whitespace_tokens(self):
        assert count_words("hello   world\nfoo\tbar") == 4

    def test_empty_text_has_no_words(self):
        assert count_words("") == 0
        assert count_words("   ") == 0

    def test_wpm_from_duration(self):
        transcript = " ".join(["word"] * 130)
        metrics = analyze_text(transcript, 60)
        assert metrics.word_count == 130
        assert metrics.wpm == 130

    def test_wpm_zero_duration(self):
        assert calculate_wpm(50, 0) == 0

    def test_wpm_is_rounded(self):
        # 10 words in 7 seconds = 85.7 wpm
        assert calculate_wpm(10, 7) == 86
        assert calculate_wpm(25, 10) == 150


class TestPaceRating:
    """Test pace classification"""

    def test_slow(self):
        assert rate_pace(100) == 'slow'

    def test_good(self):
        assert rate_pace(130) == 'good'

    def test_fast(self):
        assert rate_pace(160) == 'fast'

    @pytest.mark.parametrize("wpm,expected", [
        (109, 'slow'),
        (110, 'good'),
        (150, 'good'),
        (151, 'fast'),
    ])
    def test_boundaries(self, wpm, expected):
        assert rate_pace(wpm) == expected


class TestFillerWords:
    """Test filler word detection"""

    def test_umbrella_is_not_um(self):
        metrics = analyze_text("umbrella is not a filler", 10)
        assert metrics.filler_count == 0

    def test_multiword_and_single_fillers(self):
        text = "Um, I mean, it was like, you know, basically done. So yeah."
        counts = count_filler_words(text)
        assert counts == {
            'um': 1, 'like': 1, 'you know': 1, 'i mean': 1, 'basically': 1, 'so': 1,
        }

    def test_case_insensitive(self):
        assert count_filler_words("UM um Um")['um'] == 3

    def test_breakdown_sorted_by_count(self):
        metrics = analyze_text("um like like like uh uh", 60)
        assert metrics.filler_words == (('like', 3), ('uh', 2), ('um', 1))

    def test_filler_rate_per_minute(self):
        metrics = analyze_text("um uh um uh", 120)
        assert metrics.filler_count == 4
        assert metrics.filler_rate == pytest.approx(2.0)

    def test_empty_transcript(self):
        metrics = analyze_text("", 45)
        assert metrics.word_count == 0
        assert metrics.wpm == 0
        assert metrics.filler_count == 0
        assert metrics.filler_words == ()

    def test_zero_duration_rate(self):
        metrics = analyze_text("um well", 0)
        assert metrics.filler_count == 1
        assert metrics.filler_rate == 0.0
        assert metrics.wpm == 0

    def test_to_dict_uses_breakdown_key(self):
        data = analyze_text("like like so", 60).to_dict()
        assert data['fillerWordBreakdown'][0] == {'word': 'like', 'count': 2}
        assert data['paceRating'] == 'slow'


class TestTextSuggestions:
    """Test pace/filler coaching lines"""

    def test_brief_slow_answer(self):
        suggestions = get_text_suggestions(analyze_text("short answer", 60))
        assert any('faster' in s for s in suggestions)
        assert any('brief' in s for s in suggestions)

    def test_many_fillers(self):
        suggestions = get_text_suggestions(analyze_text("um " * 20, 60))
        assert any('Reduce filler words (20 detected)' in s for s in suggestions)


class TestHelpers:
    """Test rounding and phrase helpers"""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (72.5, 73),
        (72.4, 72),
        (0.0, 0),
        (-0.5, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_count_phrase_word_boundaries(self):
        assert count_phrase("um umbrella um, drum", "um") == 2

    def test_phrase_spans_extra_whitespace(self):
        assert contains_phrase("you   know what", "you know")

    def test_symbol_phrase(self):
        assert contains_phrase("latency dropped 40%", "%")

    def test_normalize_curly_apostrophe(self):
        assert normalize("I’m Not Sure") == "i'm not sure"

    @pytest.mark.parametrize("token,expected", [
        ('caching', 'cach'),
        ('ring', 'ring'),
        ('deployed', 'deploy'),
        ('red', 'red'),
        ('hooks', 'hook'),
        ('class', 'class'),
        ('bus', 'bus'),
    ])
    def test_stem(self, token, expected):
        assert stem(token) == expected
