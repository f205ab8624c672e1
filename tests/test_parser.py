"""Tests for DutchParser."""

from __future__ import annotations

import io
import json

import pytest

import parsedutch as pd
from parsedutch.nlcst import nlcst, walker
from parsedutch.nlcst.nlcst import NodeType
from parsedutch.nlcst.parser import PASSES, DutchParser, configure, read

# ===================================================================
# Helpers
# ===================================================================

SAMPLES = [
    "",
    "St. Augustinus. Enquête! (Herbevestigt). Z. Em. de Hoogwaardige Heer. Een andere zin!",
    "'s-Gravenhage. ’s Ochtends!",
    "'t Kofschip. ’t Kofschip!",
    "Kom 'ns? Kom ’ns!",
    "D' eedlen's.",
    "Bijvoorbeeld iets als' de voorgaande.",
    "Eerste alinea.\n\n  Tweede alinea, met o. a. St. Jan.  \n",
    "That '70s Show. Dat is  d.w.z. heel   lang geleden...",
]


def _sentences(root: nlcst.Node) -> list[str]:
    """Text of every sentence in the tree, in document order."""
    found = []

    def _visit(node):
        if node.type is NodeType.SENTENCE:
            found.append(nlcst.to_string(node))
        elif not node.is_leaf:
            for child in node.children:
                _visit(child)

    _visit(root)
    return found


def _sentence(tree: nlcst.Node, index: int = 0) -> nlcst.Node:
    """The index-th sentence of the first paragraph."""
    paragraph = tree.children[0]
    return [c for c in paragraph.children if c.type is NodeType.SENTENCE][index]


def _words(node: nlcst.Node) -> list[str]:
    """Text of the word children of a sentence."""
    return [nlcst.to_string(c) for c in node.children if c.type is NodeType.WORD]


# ===================================================================
# Construction
# ===================================================================


class TestConstruction:
    """Tests for options and sources."""

    def test_position_default(self):
        assert DutchParser().position is True

    def test_position_true(self):
        assert DutchParser({"position": True}).position is True

    def test_position_false(self):
        assert DutchParser(options={"position": False}).position is False

    def test_passes_order(self, dutch):
        assert dutch.passes == ("elision", "abbreviation")

    def test_rejects_non_mapping_options(self):
        with pytest.raises(pd.ParseDutchException) as exc:
            DutchParser(None, ["position"])
        assert exc.value.errno == pd.ECONFIG

    def test_rejects_non_bool_position(self):
        with pytest.raises(pd.ParseDutchException) as exc:
            DutchParser({"position": "no"})
        assert exc.value.errno == pd.ECONFIG

    def test_ignores_unknown_options(self):
        assert configure({"position": False, "pedantic": True}) == {"position": False}

    def test_accepts_document(self, dutch):
        assert DutchParser("Alpha bravo charlie").parse() == dutch.parse("Alpha bravo charlie")

    def test_accepts_file(self, dutch):
        doc = io.StringIO("Alpha bravo charlie")
        assert DutchParser(doc).parse() == dutch.parse("Alpha bravo charlie")

    def test_accepts_virtual_file(self, dutch):
        class VFile:
            def __init__(self, contents):
                self.contents = contents

        assert dutch.parse(VFile("Alpha bravo")) == dutch.parse("Alpha bravo")

    def test_accepts_bytes(self):
        assert read("Enquête".encode("utf-8")) == "Enquête"

    def test_rejects_unreadable_source(self, dutch):
        with pytest.raises(pd.ParseDutchException) as exc:
            dutch.parse(42)
        assert exc.value.errno == pd.EIOIN

    def test_rejects_invalid_utf8(self):
        with pytest.raises(pd.ParseDutchException) as exc:
            read(b"\xff\xfe\xfa")
        assert exc.value.errno == pd.EIOIN

    def test_rejects_undecodable_file(self, dutch):
        doc = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfa"), encoding="utf-8")
        with pytest.raises(pd.ParseDutchException) as exc:
            dutch.parse(doc)
        assert exc.value.errno == pd.EIOIN

    def test_rejects_failing_file(self, dutch):
        class Broken:
            def read(self):
                raise OSError("disk gone")

        with pytest.raises(pd.ParseDutchException) as exc:
            dutch.parse(Broken())
        assert exc.value.errno == pd.EIOIN

    def test_wraps_unexpected_pass_errors(self, dutch, monkeypatch):
        def _broken(children):
            raise RuntimeError("boom")

        monkeypatch.setattr(dutch, "_passes", (("broken", NodeType.SENTENCE, _broken),))
        with pytest.raises(pd.ParseDutchException) as exc:
            dutch.parse("Een zin.")
        assert exc.value.errno == pd.EUNDEF
        assert "broken" in str(exc.value)


# ===================================================================
# Abbreviations
# ===================================================================


class TestAbbreviations:
    """Tests that abbreviations do not end a sentence."""

    def test_dutch_abbreviations(self, dutch):
        tree = dutch.parse(
            "St. Augustinus. Enquête! (Herbevestigt). Z. Em. de "
            "Hoogwaardige Heer. Een andere zin!"
        )
        assert _sentences(tree) == [
            "St. Augustinus.",
            "Enquête!",
            "(Herbevestigt).",
            "Z. Em. de Hoogwaardige Heer.",
            "Een andere zin!",
        ]

    def test_merged_sentence_keeps_white_space(self, dutch):
        sentence = _sentence(dutch.parse("St. Augustinus."))
        assert [c.type for c in sentence.children] == [
            NodeType.WORD,
            NodeType.PUNCTUATION,
            NodeType.WHITESPACE,
            NodeType.WORD,
            NodeType.PUNCTUATION,
        ]

    def test_joined_honorific(self, dutch):
        assert _sentences(dutch.parse("Z.Em. de Heer. Daarna niets.")) == [
            "Z.Em. de Heer.",
            "Daarna niets.",
        ]

    def test_case_insensitive(self, dutch):
        assert _sentences(dutch.parse("DHR. Jansen komt.")) == ["DHR. Jansen komt."]

    def test_multi_word_abbreviation(self, dutch):
        assert _sentences(dutch.parse("Dat is o. a. mooi. Klaar.")) == [
            "Dat is o. a. mooi.",
            "Klaar.",
        ]

    def test_joined_multi_word_abbreviation(self, dutch):
        assert _sentences(dutch.parse("Het is groot, d.w.z. heel groot.")) == [
            "Het is groot, d.w.z. heel groot."
        ]

    def test_partial_multi_word_abbreviation(self, dutch):
        assert _sentences(dutch.parse("Hij zag a. Daarna niets.")) == [
            "Hij zag a.",
            "Daarna niets.",
        ]

    def test_unlisted_word_ends_sentence(self, dutch):
        assert _sentences(dutch.parse("Dit is een zin. En nog een.")) == [
            "Dit is een zin.",
            "En nog een.",
        ]

    def test_abbreviation_at_end(self, dutch):
        assert _sentences(dutch.parse("Wij gaan naar St.")) == ["Wij gaan naar St."]

    def test_does_not_cross_paragraphs(self, dutch):
        tree = dutch.parse("Zie St.\nAugustinus.")
        assert [c.type for c in tree.children] == [
            NodeType.PARAGRAPH,
            NodeType.WHITESPACE,
            NodeType.PARAGRAPH,
        ]
        assert _sentences(tree) == ["Zie St.", "Augustinus."]

    def test_tokenize_paragraph(self, dutch):
        paragraph = dutch.tokenize_paragraph("St. Augustinus. Enquête!")
        assert paragraph.type is NodeType.PARAGRAPH
        assert _sentences(paragraph) == ["St. Augustinus.", "Enquête!"]


# ===================================================================
# Elisions
# ===================================================================


class TestElisions:
    """Tests that elided forms are one word."""

    @pytest.mark.parametrize(
        "text,word",
        [
            ("'s-Gravenhage.", "'s-Gravenhage"),
            ("’s Ochtends!", "’s"),
            ("'t Kofschip.", "'t"),
            ("’t Kofschip!", "’t"),
            ("'n Liedje.", "'n"),
            ("’n Liedje!", "’n"),
            ("Kom 'ns?", "'ns"),
            ("Kom ’ns!", "’ns"),
            ("Wanneer heb je 'er voor het laatst gezien?", "'er"),
            ("Wanneer heb je ’er voor het laatst gezien?", "’er"),
            ("Wanneer heb je 'em voor het laatst gezien?", "'em"),
            ("Wanneer heb je ’em voor het laatst gezien?", "’em"),
            ("Wat deed 'ie?", "'ie"),
            ("Wat deed ’ie?", "’ie"),
            ("'Tis leuk!", "'Tis"),
            ("’Tis leuk!", "’Tis"),
            ("'Twas leuk!", "'Twas"),
            ("’Twas leuk!", "’Twas"),
            ("That '70s Show.", "'70s"),
            ("That ’70s Show.", "’70s"),
            ("D' eedlen's.", "D'"),
            ("D’ eedlen’s.", "D’"),
        ],
    )
    def test_elision_is_one_word(self, dutch, text, word):
        assert word in _words(_sentence(dutch.parse(text)))

    def test_hyphen_stays_inside_word(self, dutch):
        word = _sentence(dutch.parse("'s-Gravenhage.")).children[0]
        assert [(c.type, c.value) for c in word.children] == [
            (NodeType.SYMBOL, "'"),
            (NodeType.TEXT, "s"),
            (NodeType.SYMBOL, "-"),
            (NodeType.TEXT, "Gravenhage"),
        ]

    def test_final_elision_children(self, dutch):
        sentence = _sentence(dutch.parse("D' eedlen's."))
        assert _words(sentence) == ["D'", "eedlen's"]
        assert [c.type for c in sentence.children[0].children] == [
            NodeType.TEXT,
            NodeType.SYMBOL,
        ]

    def test_apostrophe_glyphs_give_same_tree(self, dutch):
        straight = json.dumps(dutch.parse("That '70s Show.").to_dict())
        curly = json.dumps(dutch.parse("That ’70s Show.").to_dict())
        assert curly.replace("\\u2019", "'") == straight

    def test_other_initial_apostrophe(self, dutch):
        sentence = _sentence(dutch.parse("Bijvoorbeeld iets als 'de voorgaande."))
        assert _words(sentence) == ["Bijvoorbeeld", "iets", "als", "de", "voorgaande"]
        assert sentence.children[6].type is NodeType.SYMBOL
        assert sentence.children[6].value == "'"

    @pytest.mark.parametrize("apostrophe", ["'", "’"])
    def test_other_final_apostrophe(self, dutch, apostrophe):
        text = "Bijvoorbeeld iets als{} de voorgaande.".format(apostrophe)
        sentence = _sentence(dutch.parse(text))
        assert _words(sentence) == ["Bijvoorbeeld", "iets", "als", "de", "voorgaande"]
        assert sentence.children[5].type is NodeType.SYMBOL
        assert sentence.children[5].value == apostrophe

    def test_merged_word_position(self, dutch):
        word = _sentence(dutch.parse("'t Kofschip.")).children[0]
        assert word.position == nlcst.Position(
            nlcst.Point(1, 1, 0), nlcst.Point(1, 3, 2)
        )

    def test_tokenize_sentence(self, dutch):
        sentence = dutch.tokenize_sentence("Kom 'ns")
        assert sentence.type is NodeType.SENTENCE
        assert _words(sentence) == ["Kom", "'ns"]

    def test_tokenize_word(self, dutch):
        word = dutch.tokenize_word("'s-Gravenhage")
        assert word.type is NodeType.WORD
        assert nlcst.to_string(word) == "'s-Gravenhage"


# ===================================================================
# Fixtures
# ===================================================================

FIXTURES = [
    ("abbreviation-st", "St. Augustinus."),
    (
        "abbreviations",
        "St. Augustinus. Enquête! (Herbevestigt). Z. Em. de "
        "Hoogwaardige Heer. Een andere zin!",
    ),
    ("elision-initial-s", "'s-Gravenhage. ’s Ochtends!"),
    ("elision-initial-t", "'t Kofschip. ’t Kofschip!"),
    ("elision-initial-n", "'n Liedje. ’n Liedje!"),
    ("elision-initial-ns", "Kom 'ns? Kom ’ns!"),
    ("elision-initial-er", "Wanneer heb je 'er voor het laatst gezien?"),
    ("elision-initial-er-smart", "Wanneer heb je ’er voor het laatst gezien?"),
    ("elision-initial-em", "Wanneer heb je 'em voor het laatst gezien?"),
    ("elision-initial-em-smart", "Wanneer heb je ’em voor het laatst gezien?"),
    ("elision-initial-ie", "Wat deed 'ie?"),
    ("elision-initial-ie-smart", "Wat deed ’ie?"),
    ("elision-initial-tis", "'Tis leuk!"),
    ("elision-initial-tis-smart", "’Tis leuk!"),
    ("elision-initial-twas", "'Twas leuk!"),
    ("elision-initial-twas-smart", "’Twas leuk!"),
    ("elision-initial-year", "That '70s Show."),
    ("elision-initial-year-smart", "That ’70s Show."),
    ("elision-final-d", "D' eedlen's."),
    ("elision-final-d-smart", "D’ eedlen’s."),
    ("elision-non-initial", "Bijvoorbeeld iets als 'de voorgaande."),
    ("elision-non-final", "Bijvoorbeeld iets als' de voorgaande."),
    ("elision-non-final-smart", "Bijvoorbeeld iets als’ de voorgaande."),
]


class TestFixtures:
    """Tests that full trees match the stored json trees."""

    @pytest.mark.parametrize("name,text", FIXTURES)
    def test_with_position(self, dutch, load_fixture, name, text):
        assert dutch.parse(text).to_dict() == load_fixture(name)

    @pytest.mark.parametrize("name,text", FIXTURES)
    def test_without_position(self, dutch_no_position, load_fixture, name, text):
        fixture = nlcst.clean(nlcst.from_dict(load_fixture(name)))
        assert dutch_no_position.parse(text) == fixture

    @pytest.mark.parametrize("name,text", FIXTURES)
    def test_fixture_text(self, load_fixture, name, text):
        assert nlcst.to_string(nlcst.from_dict(load_fixture(name))) == text


# ===================================================================
# Properties
# ===================================================================


class TestProperties:
    """Tests that hold for every input."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_round_trip(self, dutch, dutch_no_position, text):
        assert nlcst.to_string(dutch.parse(text)) == text
        assert nlcst.to_string(dutch_no_position.parse(text)) == text

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, dutch, text):
        tree = dutch.parse(text)
        for _, ntype, fn in PASSES:
            assert walker.walk(tree, ntype, fn) is tree

    @pytest.mark.parametrize("text", SAMPLES)
    def test_position_omission(self, dutch, dutch_no_position, text):
        assert nlcst.clean(dutch.parse(text)) == dutch_no_position.parse(text)

    def test_no_positions_when_disabled(self, dutch_no_position):
        tree = dutch_no_position.parse(SAMPLES[1])
        assert "position" not in json.dumps(tree.to_dict())

    def test_trees_are_independent(self, dutch):
        first = dutch.parse(SAMPLES[2])
        second = dutch.parse(SAMPLES[2])
        assert first == second
        assert first is not second

    def test_empty(self, dutch):
        tree = dutch.parse("")
        assert tree.type is NodeType.ROOT
        assert tree.children == ()
        assert nlcst.to_string(tree) == ""
        assert tree.position == nlcst.Position(
            nlcst.Point(1, 1, 0), nlcst.Point(1, 1, 0)
        )

    def test_empty_entry_points(self, dutch):
        assert dutch.tokenize_paragraph("").children == ()
        assert dutch.tokenize_sentence("").children == ()
        assert dutch.tokenize_word("").children == ()
