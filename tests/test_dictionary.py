"""Tests for the Dictionary vocabulary."""

from wordmover.dictionary import Dictionary


class TestDictionaryBasics:
    def test_new_dictionary_is_empty(self):
        dictionary = Dictionary()
        assert len(dictionary) == 0
        assert dictionary.is_empty()

    def test_insert_deduplicates(self):
        dictionary = Dictionary()
        for word in ["hello", "мои", "16", "друзья", "мои", "други", "other"]:
            dictionary.insert(word)

        assert len(dictionary) == 6
        assert not dictionary.is_empty()

    def test_insert_is_idempotent(self):
        dictionary = Dictionary()
        dictionary.insert("намело")
        index = dictionary.word_index("намело")
        dictionary.insert("намело")

        assert len(dictionary) == 1
        assert dictionary.word_index("намело") == index

    def test_insert_assigns_counter_values_before_reindex(self):
        dictionary = Dictionary()
        dictionary.insert("у")
        dictionary.insert("намело")

        assert dictionary.word_index("у") == 0
        assert dictionary.word_index("намело") == 1

    def test_extend_from_other_dictionary_and_list(self):
        dictionary = Dictionary()
        other = Dictionary()
        other.insert("намело")
        other.insert("сугробы")

        dictionary.extend(other)
        dictionary.extend(["hello", "мои", "друзья", "мои", "други"])

        assert len(dictionary) == 6

    def test_from_words(self):
        dictionary = Dictionary.from_words(["hello", "мои", "друзья", "мои", "други"])
        assert len(dictionary) == 4


class TestDictionaryQueries:
    def test_contains(self):
        dictionary = Dictionary.from_words(["hello", "мои", "друзья", "мои", "други"])

        assert dictionary.contains("друзья")
        assert "друзья" in dictionary
        assert not dictionary.contains("враги")

    def test_word_index_after_reindex_is_alphabetical(self):
        dictionary = Dictionary.from_words(["намело", "сугробы", "у", "нашего", "крыльца"])

        assert dictionary.word_index("крыльца") == 0
        assert dictionary.word_index("намело") == 1
        assert dictionary.word_index("нашего") == 2
        assert dictionary.word_index("сугробы") == 3
        assert dictionary.word_index("у") == 4

    def test_word_index_unknown_is_none(self):
        dictionary = Dictionary.from_words(["намело"])
        assert dictionary.word_index("unknown") is None

    def test_iteration_and_items_follow_key_order(self):
        dictionary = Dictionary()
        dictionary.extend(["c", "a", "b"])

        assert list(dictionary) == ["a", "b", "c"]
        assert dictionary.items() == [("a", 1), ("b", 2), ("c", 0)]


class TestDictionaryReindex:
    def test_reindex_makes_positions_contiguous(self):
        dictionary = Dictionary()
        dictionary.extend(["zeta", "alpha", "mu"])
        dictionary.reindex()

        assert sorted(index for _, index in dictionary.items()) == [0, 1, 2]
        assert dictionary.items() == [("alpha", 0), ("mu", 1), ("zeta", 2)]

    def test_insert_after_reindex_continues_counter(self):
        dictionary = Dictionary.from_words(["b", "a"])
        dictionary.insert("0")

        assert dictionary.word_index("0") == 2

    def test_equality_depends_on_indices(self):
        first = Dictionary()
        first.extend(["b", "a"])
        second = Dictionary()
        second.extend(["a", "b"])

        assert first != second
        first.reindex()
        second.reindex()
        assert first == second


class TestDictionaryJoin:
    def test_join(self):
        dictionary = Dictionary.from_words(["намело", "сугробы", "у", "нашего", "крыльца"])
        other = Dictionary.from_words(["стонет", "стужа", "и", "намело", "сугробы"])

        joined = dictionary.join(other)

        expected = Dictionary.from_words(
            ["сугробы", "крыльца", "нашего", "намело", "у", "стужа", "стонет", "и"]
        )
        assert joined == expected
        assert "и" in joined
        assert len(joined) == 8

    def test_join_is_commutative(self):
        first = Dictionary.from_words(["намело", "сугробы", "у"])
        second = Dictionary.from_words(["стужа", "у", "и"])

        assert first.join(second) == second.join(first)

    def test_join_does_not_mutate_inputs(self):
        first = Dictionary()
        first.extend(["b", "a"])
        second = Dictionary.from_words(["c"])
        before = first.items()

        first.join(second)

        assert first.items() == before
        assert len(second) == 1
