"""
Tests for game.render module.
"""

from article_model import Heading, NonWord, OrderedList, Paragraph, UnorderedList, WikiArticle, Word
from game import GameState, TokenTreatment, mask_token, render_tokens, section_lines


def test_mask_token():
    assert mask_token(Word("Kraków"), TokenTreatment.BLANK) == "______"
    assert mask_token(Word("fox"), TokenTreatment.SHOW) == "fox"
    assert mask_token(Word("fox"), TokenTreatment.HIGHLIGHT) == "fox"


def test_render_tokens(state, rust_article):
    state.load(rust_article)
    tokens = rust_article.content[0].tokens
    assert render_tokens(state, tokens) == "____ __ ____"
    state.register_guess("is")
    assert render_tokens(state, tokens) == "____ is ____"


def test_section_lines_numbers_and_nesting():
    content = [
        Heading(2, [Word("Pets")]),
        OrderedList([
            [Paragraph([Word("cat")])],
            [
                Paragraph([Word("dog")]),
                UnorderedList([[Paragraph([Word("puppy")])]]),
            ],
        ]),
    ]
    lines = list(section_lines(content))
    assert [(l.kind, l.level) for l in lines] == [
        ("heading", 2), ("paragraph", 0), ("paragraph", 0), ("paragraph", 0),
    ]
    assert [l.prefix for l in lines] == ["", "1. ", "2. ", "    • "]
    assert [l.tokens[0].text for l in lines] == ["Pets", "cat", "dog", "puppy"]


def test_section_lines_follow_game_state():
    state = GameState()
    state.load(WikiArticle(
        title=[Word("Pets")],
        content=[UnorderedList([[Paragraph([Word("cat"), NonWord("!")])]])],
    ))
    (line,) = section_lines(state.article.content)
    assert render_tokens(state, line.tokens) == "___!"
    state.register_guess("pets")
    assert render_tokens(state, line.tokens) == "cat!"
