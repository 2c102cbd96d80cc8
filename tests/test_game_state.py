"""
Tests for game.state module.
"""

from article_model import NonWord, Paragraph, UnorderedList, WikiArticle, Word, iter_tokens
from game import GameState, TokenTreatment, normalize_guess


def test_initial_state_is_empty(state):
    assert state.article is None
    assert not state.is_loaded
    assert state.guesses == ()
    assert state.selected_guess is None


def test_empty_state_queries_are_safe(state):
    assert state.count_occurrences("anything") is None
    assert state.title_complete() is False
    assert state.guess_table() == []
    assert state.revealed_ratio() == 0.0
    assert state.token_treatment(Word("x")) is TokenTreatment.BLANK
    assert state.token_treatment(NonWord(" ")) is TokenTreatment.SHOW
    assert state.register_guess("word") == "word"
    assert state.toggle_selection("word") == "word"


def test_normalize_guess():
    assert normalize_guess("  Rust \n") == "rust"
    assert normalize_guess("KRAKÓW") == "kraków"


def test_load_resets_guesses_and_selection(state, rust_article, nested_article):
    state.load(rust_article)
    state.register_guess("rust")
    state.toggle_selection("fast")

    state.load(nested_article)
    assert state.article is nested_article
    assert state.guesses == ()
    assert state.selected_guess is None


def test_register_guess_normalizes_and_is_idempotent(state, rust_article):
    state.load(rust_article)
    assert state.register_guess("  Fast ") == "fast"
    before = state.guesses
    state.register_guess("fast")
    state.register_guess("FAST")
    assert state.guesses == before == ("fast",)


def test_empty_guess_is_ignored(state, rust_article):
    state.load(rust_article)
    assert state.register_guess("   ") is None
    assert state.register_guess("") is None
    assert state.guesses == ()


def test_toggle_selection_symmetry(state, rust_article):
    state.load(rust_article)
    assert state.toggle_selection("Rust") == "rust"
    assert state.toggle_selection(" rust ") is None
    assert state.selected_guess is None

    state.toggle_selection("fast")
    state.toggle_selection("fast")
    state.toggle_selection("fast")
    assert state.selected_guess == "fast"


def test_toggle_other_word_replaces_selection(state, rust_article):
    state.load(rust_article)
    state.toggle_selection("is")
    assert state.toggle_selection("fast") == "fast"
    assert state.toggle_selection("") is None


def test_selection_does_not_register_guess(state, rust_article):
    state.load(rust_article)
    state.toggle_selection("fast")
    assert state.guesses == ()


def test_token_treatment(state, rust_article):
    state.load(rust_article)
    assert state.token_treatment(NonWord(", ")) is TokenTreatment.SHOW
    assert state.token_treatment(Word("is")) is TokenTreatment.BLANK

    state.register_guess("is")
    assert state.token_treatment(Word("is")) is TokenTreatment.SHOW
    assert state.token_treatment(Word("IS")) is TokenTreatment.SHOW

    state.toggle_selection("is")
    assert state.token_treatment(Word("Is")) is TokenTreatment.HIGHLIGHT


def test_highlight_without_guess(state, rust_article):
    state.load(rust_article)
    state.toggle_selection("fast")
    assert state.token_treatment(Word("fast")) is TokenTreatment.HIGHLIGHT
    assert state.token_treatment(Word("is")) is TokenTreatment.BLANK


def test_case_insensitive_matching(state):
    state.load(WikiArticle(
        title=[Word("Title")],
        content=[Paragraph([Word("rust"), NonWord(" "), Word("RUST")])],
    ))
    state.register_guess("Rust")
    assert state.token_treatment(Word("rust")) is TokenTreatment.SHOW
    assert state.token_treatment(Word("RUST")) is TokenTreatment.SHOW


def test_title_completion_unlocks_whole_document(state, nested_article):
    state.load(nested_article)
    words = [t for t in iter_tokens(nested_article) if isinstance(t, Word)]
    assert any(state.token_treatment(w) is TokenTreatment.BLANK for w in words)

    state.register_guess("quick")
    assert not state.title_complete()
    state.register_guess("Fox")
    assert state.title_complete()
    assert all(state.token_treatment(w) is not TokenTreatment.BLANK for w in words)
    assert state.token_treatment(Word("cat")) is TokenTreatment.SHOW


def test_title_complete_is_recomputed(state, rust_article):
    state.load(rust_article)
    state.register_guess("rust")
    assert state.title_complete()
    state.load(rust_article)
    assert not state.title_complete()


def test_count_occurrences(state, rust_article):
    state.load(rust_article)
    assert state.count_occurrences("rust") == 2
    assert state.count_occurrences(" RUST ") == 2
    assert state.count_occurrences("slow") == 0


def test_count_descends_into_nested_lists(state, nested_article):
    state.load(nested_article)
    assert state.count_occurrences("fox") == 3   # tytuł + dwa elementy list
    assert state.count_occurrences("cat") == 1
    assert state.count_occurrences("animals") == 1


def test_count_single_nested_item(state):
    state.load(WikiArticle(
        title=[],
        content=[UnorderedList([[Paragraph([Word("fox")])]])],
    ))
    assert state.count_occurrences("fox") == 1


def test_empty_document(state):
    state.load(WikiArticle(title=[], content=[]))
    assert state.count_occurrences("anything") == 0
    assert state.title_complete() is True
    assert state.revealed_ratio() == 0.0


def test_title_without_words_is_complete(state):
    state.load(WikiArticle(title=[NonWord("?!")], content=[Paragraph([Word("x")])]))
    assert state.title_complete()
    assert state.token_treatment(Word("x")) is TokenTreatment.SHOW


def test_guess_table(state, nested_article):
    state.load(nested_article)
    for g in ("fox", "zebra", "Dog"):
        state.register_guess(g)
    assert state.guess_table() == [("dog", 1), ("fox", 3), ("zebra", 0)]


def test_revealed_ratio(state, rust_article):
    state.load(rust_article)
    assert state.revealed_ratio() == 0.0
    state.register_guess("is")
    assert state.revealed_ratio() == 0.25
    state.register_guess("rust")
    assert state.revealed_ratio() == 1.0


def test_independent_instances(rust_article):
    a, b = GameState(), GameState()
    a.load(rust_article)
    a.register_guess("rust")
    assert b.guesses == ()
    assert b.article is None


def test_highlight_wins_over_title_completion(state, rust_article):
    state.load(rust_article)
    state.toggle_selection("fast")
    state.register_guess("rust")
    assert state.title_complete()
    assert state.token_treatment(Word("fast")) is TokenTreatment.HIGHLIGHT
    assert state.token_treatment(Word("is")) is TokenTreatment.SHOW


def test_count_in_very_deep_list(state):
    section = Paragraph([Word("fox")])
    for _ in range(3000):
        section = UnorderedList([[section]])
    state.load(WikiArticle(title=[], content=[section]))
    assert state.count_occurrences("fox") == 1
