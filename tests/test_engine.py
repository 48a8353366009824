import pytest
from dailyword.engine import (
    Guess, LetterMatch, ScoredGuess, ScoredLetter, Solution, UnknownWordError, WordError,
    parse_guess, pattern, score, validate_guess,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,solution,expected", [
    ("belle", "level", "-+???"),
    ("level", "level", "+++++"),
    ("lemon", "level", "++---"),
    ("cools", "scoop", "??+-?"),
    ("scoop", "scoop", "+++++"),
    ("raise", "crane", "??--+"),
    ("stare", "crane", "--+?+"),
    ("erase", "speed", "?--??"),
    ("geese", "crane", "----+"),
    ("llama", "lemon", "+--?-"),
    ("blame", "rusty", "-----"),
])
def test_pattern_n5_golden(guess, solution, expected):
    assert pattern(guess, solution) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,solution,expected", [
    ("settle", "letter", "-+++??"),
    ("little", "letter", "+-++-?"),
    ("planet", "palate", "+??-??"),
    ("kitten", "tinket", "?+??+?"),
])
def test_pattern_n6_samples(guess, solution, expected):
    assert pattern(guess, solution) == expected


def test_exact_priority_speed_erase():
    sg = score(Guess.parse("ERASE"), Solution.parse("speed"))
    assert sg.format() == "E?,R-,A-,S?,E?"
    assert [l.match for l in sg] == [
        LetterMatch.PRESENT, LetterMatch.ABSENT, LetterMatch.ABSENT,
        LetterMatch.PRESENT, LetterMatch.PRESENT,
    ]
    assert not sg.is_solved


WORDS = ["rusty", "speed", "erase", "level", "belle", "geese", "eerie", "llama",
         "mamma", "crane", "scoop", "cools", "kitty", "jazzy", "fuzzy", "lemon"]


@pytest.mark.parametrize("word", WORDS)
def test_scoring_a_word_against_itself_is_all_exact(word):
    sg = score(Guess.parse(word), Solution.parse(word))
    assert sg.is_solved
    assert sg.pattern == "+" * 5


def test_duplicate_letters_are_never_over_credited():
    for s in WORDS:
        for g in WORDS:
            sg = score(Guess.parse(g), Solution.parse(s))
            for c in set(g):
                credited = sum(
                    1 for l in sg if l.char == c.upper() and l.match is not LetterMatch.ABSENT
                )
                assert credited <= s.count(c), (g, s, c)
                # exact positions for c are always credited
                exact = sum(1 for a, b in zip(g, s) if a == b == c)
                assert credited >= min(exact, s.count(c))


def test_disjoint_words_are_all_absent():
    pairs = [(g, s) for s in WORDS for g in WORDS if not set(g) & set(s)]
    assert pairs
    for g, s in pairs:
        assert score(Guess.parse(g), Solution.parse(s)).pattern == "-----", (g, s)


def test_score_rejects_length_mismatch():
    with pytest.raises(WordError, match="guess has 6 letters, solution has 5"):
        score(Guess.parse("letter", 6), Solution.parse("rusty"))
    with pytest.raises(WordError):
        pattern("ab", "abc")


def test_score_keeps_guess_order_and_upper_cases_letters():
    sg = score(Guess.parse("crane"), Solution.parse("rusty"))
    assert sg.word == "CRANE"
    assert sg.format() == "C-,R?,A-,N-,E-"


# --- word types ---
def test_words_normalize_to_lower_case():
    assert Solution.parse("RuStY").text == "rusty"
    assert str(Guess.parse("  CRANE ")) == "crane"


@pytest.mark.parametrize("raw,msg", [
    ("rustys", "too many letters: 6, must be 5"),
    ("rus", "too few letters: 3, must be 5"),
    ("ru5ty", "cannot contain non ascii alphabetic letters"),
    ("rüsty", "cannot contain non ascii alphabetic letters"),
])
def test_malformed_words_are_rejected(raw, msg):
    with pytest.raises(WordError, match=msg):
        Solution.parse(raw)


def test_word_length_is_configurable():
    assert len(Solution.parse("letter", 6)) == 6
    assert Solution("letter", 6) == Solution.parse("letter", 6)
    with pytest.raises(WordError):
        Guess.parse("crane", 6)


@pytest.mark.parametrize("cls,raw,msg", [
    (Solution, "ru", "too few letters: 2, must be 5"),
    (Guess, "rustys", "too many letters: 6, must be 5"),
])
def test_direct_construction_checks_default_length(cls, raw, msg):
    with pytest.raises(WordError, match=msg):
        cls(raw)


# --- letters ---
def test_letter_match_symbols():
    assert [m.symbol for m in LetterMatch] == ["+", "?", "-"]
    assert LetterMatch.from_symbol("?") is LetterMatch.PRESENT
    with pytest.raises(ValueError):
        LetterMatch.from_symbol("*")


def test_scored_letter_parse_and_format():
    assert str(ScoredLetter.parse("r+")) == "R+"
    assert ScoredLetter.parse("A?") == ScoredLetter("a", LetterMatch.PRESENT)
    for bad in ["R", "R+?", "1+", "R*", "ı+", "ſ?"]:
        with pytest.raises(ValueError):
            ScoredLetter.parse(bad)
    with pytest.raises(ValueError, match="ascii alphabetic"):
        ScoredLetter("ı", LetterMatch.EXACT)


def test_scored_guess_compact_form():
    sg = ScoredGuess.parse("R+,U-,S?,T+,Y?")
    assert sg.word == "RUSTY"
    assert sg.pattern == "+-?+?"
    assert sg.format() == "R+,U-,S?,T+,Y?"
    assert not sg.is_solved
    with pytest.raises(ValueError):
        ScoredGuess.parse("")


# --- validation ---
def test_validate_guess_n5():
    allowed = {"crane", "raise", "stare"}
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess("trace", allowed, N=5) is False


def test_parse_guess_errors():
    allowed = {"crane"}
    assert parse_guess("Crane", allowed) == Guess("crane")
    with pytest.raises(UnknownWordError, match="not in word list"):
        parse_guess("trace", allowed)
    with pytest.raises(WordError, match="too many"):
        parse_guess("cranes", allowed)
