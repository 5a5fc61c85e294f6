from __future__ import annotations
from wordtok.hashtags import HashtagParts, split_hashtag
from wordtok.types import TokenKind
from wordtok.words.tokenizer import tokenize_words


def test_split_hashtag_cases():
    cases = [
        ("#test", ["test"]),
        ("#Test", ["Test"]),
        ("#t", ["t"]),
        ("#T", ["T"]),
        ("#TestWhatever", ["Test", "Whatever"]),
        ("#testWhatever", ["test", "Whatever"]),
        ("#ÉpopéeRusse", ["Épopée", "Russe"]),
        ("#TestOkFinal", ["Test", "Ok", "Final"]),
        ("#TestOkFinalT", ["Test", "Ok", "Final", "T"]),
        ("#Test123Whatever", ["Test", "123", "Whatever"]),
        ("#TDF2018", ["TDF", "2018"]),
        ("#T2018", ["T", "2018"]),
        ("#TheID2018", ["The", "ID", "2018"]),
        ("#8YearsOfOneDirection", ["8", "Years", "Of", "One", "Direction"]),
        ("#This18Gloss", ["This", "18", "Gloss"]),
        ("#WordpressIDInformation", ["Wordpress", "ID", "Information"]),
        ("#LearnWCFInSixEasyMonths", ["Learn", "WCF", "In", "Six", "Easy", "Months"]),
        ("#ThisIsInPascalCase", ["This", "Is", "In", "Pascal", "Case"]),
        ("#whatAboutThis", ["what", "About", "This"]),
        ("#This123thingOverload", ["This", "123", "thing", "Overload"]),
        ("#final19", ["final", "19"]),
        ("$CashMoney", ["Cash", "Money"]),
    ]
    for hashtag, expected in cases:
        assert split_hashtag(hashtag) == expected, hashtag


def test_split_bare_body():
    assert split_hashtag("TestOkFinal") == ["Test", "Ok", "Final"]


def test_empty_hashtag_has_no_parts():
    assert split_hashtag("#") == []
    assert split_hashtag("") == []


def test_parts_rebuild_the_body():
    for body in ("WordpressIDInformation", "This123thingOverload", "a1B2c3"):
        assert "".join(HashtagParts(body)) == body


def test_split_scanned_hashtag_token():
    tokens = tokenize_words("Allez #ÉpopéeRusse2018 !")
    hashtags = [t.text for t in tokens if t.kind is TokenKind.HASHTAG]
    assert hashtags == ["#ÉpopéeRusse2018"]
    assert split_hashtag(hashtags[0]) == ["Épopée", "Russe", "2018"]


def test_only_unicode_digits_open_a_number_part():
    # CJK numerals are letters here
    assert split_hashtag("#一二") == ["一二"]
    assert split_hashtag("#Top一二") == ["Top一二"]
    assert split_hashtag("#Tag٣٤") == ["Tag", "٣٤"]
    assert split_hashtag("#Fin²") == ["Fin", "²"]
