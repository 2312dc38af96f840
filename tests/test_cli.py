"""Tests for the command line tools."""

import pytest

from ans_visualizer import decode, encode
from ans_visualizer.scripts import analyze_states, verify_transitions


class TestEncode:
    """Tests for ans-encode."""

    def test_encode_with_alphabet(self, capsys):
        assert encode.main(["AABCA", "--alphabet", "A:3,B:2,C:1"]) == 0
        out = capsys.readouterr().out
        assert "Final state:     44" in out
        assert "ans-decode 44 --alphabet A:3,B:2,C:1 --leading 2" in out

    def test_estimated_alphabet(self, capsys):
        assert encode.main(["ABACAB"]) == 0
        assert "Alphabet: A:3,B:2,C:1" in capsys.readouterr().out

    def test_unknown_symbol(self):
        with pytest.raises(SystemExit) as exc:
            encode.main(["ABD", "--alphabet", "A:3,B:2,C:1"])
        assert exc.value.code == 2

    def test_no_decode_hint_from_non_root(self, capsys):
        assert encode.main(["BC", "--alphabet", "A:3,B:2,C:1", "--initial-state", "7"]) == 0
        out = capsys.readouterr().out
        assert "Final state:" in out
        assert "Decode with" not in out

    def test_leading_count(self):
        assert encode.leading_count("AABA", "A") == 2
        assert encode.leading_count("BA", "A") == 0


class TestDecode:
    """Tests for ans-decode."""

    def test_decode(self, capsys):
        assert decode.main(["44", "--leading", "2"]) == 0
        out = capsys.readouterr().out
        assert "Chain:            44 -> 23 -> 3 -> 0 -> 0" in out
        assert "Encoded sequence: A → A → B → C → A" in out
        assert "44 --A--> 86" in out

    def test_root_state(self, capsys):
        assert decode.main(["1"]) == 0
        assert "(root state, nothing to decode)" in capsys.readouterr().out

    def test_negative_state(self):
        with pytest.raises(SystemExit) as exc:
            decode.main(["-1"])
        assert exc.value.code == 2

    def test_bad_alphabet(self):
        with pytest.raises(SystemExit):
            decode.main(["5", "--alphabet", "A:0"])


class TestAnalyze:
    """Tests for the state analysis report."""

    def test_render_grid_whole_periods(self, abc):
        lines = analyze_states.render_grid(abc, 12, width=14)
        assert lines == ["       0  AAABBC AAABBC"]

    def test_render_grid_wraps(self, abc):
        lines = analyze_states.render_grid(abc, 12, width=6)
        assert lines == ["       0  AAABBC", "       6  AAABBC"]

    def test_report(self, capsys):
        assert analyze_states.main(["--max-states", "24"]) == 0
        out = capsys.readouterr().out
        assert "L = 6" in out
        assert "Pattern: A A A B B C" in out
        assert "A: 12 states" in out


class TestVerify:
    """Tests for the transition self-check."""

    def test_passes(self, capsys):
        assert verify_transitions.run(["--max-states", "200"]) == 0
        assert "TEST PASSED" in capsys.readouterr().out

    def test_single_symbol_passes(self):
        assert verify_transitions.run(["--alphabet", "A:4", "--max-states", "50"]) == 0

    def test_bad_alphabet_fails(self, capsys):
        assert verify_transitions.run(["--alphabet", "A:0"]) == 1
        assert "TEST FAILED" in capsys.readouterr().out

    def test_check_state_clean(self, abc):
        assert verify_transitions.check_state(44, abc, 100) == []
