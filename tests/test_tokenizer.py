from valence.tokenizer import tokenize


def test_lowercases_and_splits_on_spaces():
    assert tokenize("Good Morning World") == ["good", "morning", "world"]


def test_strips_punctuation_and_digits():
    assert tokenize("Cats are stupid!!! 100%") == ["cats", "are", "stupid", ""]


def test_hyphen_separates_words():
    assert tokenize("well-known anti-hero") == ["well", "known", "anti", "hero"]


def test_repeated_spaces_produce_empty_tokens():
    assert tokenize("good,  bad") == ["good", "", "bad"]
    assert tokenize(" good") == ["", "good"]


def test_empty_and_letterless_input_yield_single_empty_token():
    assert tokenize("") == [""]
    assert tokenize("!!!42???") == [""]
    assert tokenize(None) == [""]


def test_tabs_and_newlines_are_removed_not_split():
    assert tokenize("good\tday\nsir") == ["gooddaysir"]


def test_language_alphabet_keeps_accented_letters():
    assert tokenize("Schöne Grüße", "a-zA-ZäöüÄÖÜß") == ["schöne", "grüße"]


def test_default_alphabet_drops_accented_letters():
    assert tokenize("Schöne Grüße") == ["schne", "gre"]


def test_token_order_follows_phrase():
    tokens = tokenize("one two three two")
    assert tokens == ["one", "two", "three", "two"]
